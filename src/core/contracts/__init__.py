"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных цветов.
"""

from .validators import (
    COLOR_SCHEMA_PATH,
    ColorContractValidator,
    color_from_dict,
    color_to_dict,
    load_color_schema,
    validate_color,
)

__all__ = [
    "COLOR_SCHEMA_PATH",
    "ColorContractValidator",
    "load_color_schema",
    "validate_color",
    "color_to_dict",
    "color_from_dict",
]
