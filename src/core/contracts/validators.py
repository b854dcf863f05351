"""
Color Contract Validator

Валидация сериализованных цветов по JSON Schema контракту (schema/color.json)
и перевод между dict и Pydantic моделями цветов.

Формат:
    {"model": "HCY", "channels": {"h": 0.1, "c": 0.4, "y": 0.5}, "alpha": 1.0}

Схема и реестр COLOR_MODELS должны описывать один и тот же набор моделей
с одинаковыми каналами: расхождение обнаруживается при создании валидатора.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.colors import COLOR_MODELS, ColorModel

COLOR_SCHEMA_PATH = Path(__file__).parent / "schema" / "color.json"


def load_color_schema(schema_path: Path = COLOR_SCHEMA_PATH) -> Dict[str, Any]:
    """
    Загрузка color схемы с meta-validation.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

    return schema


def _schema_channels(schema: Dict[str, Any]) -> Dict[str, tuple[str, ...]]:
    # model -> required каналы из if/then блоков схемы
    channels = {}
    for rule in schema.get("allOf", []):
        model = rule["if"]["properties"]["model"]["const"]
        required = rule["then"]["properties"]["channels"]["required"]
        channels[model] = tuple(required)
    return channels


class ColorContractValidator:
    """
    Валидатор color контракта.

    Кроме проверки по схеме отвечает за сериализацию: to_dict / from_dict.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Args:
            schema_path: путь к схеме (default: schema/color.json)

        Raises:
            ValueError: если схема не согласована с COLOR_MODELS
        """
        self.schema = load_color_schema(schema_path or COLOR_SCHEMA_PATH)
        self.validator = Draft202012Validator(self.schema)

        expected = {
            name: tuple(spec.name for spec in model.CHANNELS)
            for name, model in COLOR_MODELS.items()
        }
        if _schema_channels(self.schema) != expected:
            raise ValueError("Color schema does not match the registered color models")

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """Все нарушения схемы в виде 'path: message', отсортированные по пути."""
        errors = sorted(self.validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        return [
            f"{'/'.join(str(part) for part in error.absolute_path) or '<root>'}: {error.message}"
            for error in errors
        ]

    @staticmethod
    def to_dict(color: ColorModel) -> Dict[str, Any]:
        return {
            "model": color.MODEL_NAME,
            "channels": {spec.name: getattr(color, spec.name) for spec in color.CHANNELS},
            "alpha": color.a,
        }

    def from_dict(self, data: Dict[str, Any]) -> ColorModel:
        """
        Цвет из dict; alpha по умолчанию 1.0.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validate(data)
        model = COLOR_MODELS[data["model"]]
        return model(**data["channels"], a=data.get("alpha", 1.0))


# Валидатор по умолчанию
_COLOR_VALIDATOR = ColorContractValidator()


def validate_color(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _COLOR_VALIDATOR.validate(data)


def color_to_dict(color: ColorModel) -> Dict[str, Any]:
    """Сериализация цвета в формат color контракта."""
    return _COLOR_VALIDATOR.to_dict(color)


def color_from_dict(data: Dict[str, Any]) -> ColorModel:
    """Десериализация цвета из формата color контракта."""
    return _COLOR_VALIDATOR.from_dict(data)
