"""
Tests for JSON Schema Contract Validators

Тестирование color контракта:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей и набора каналов модели
- Детекция нарушений constraints (min/max/enum)
- Интеграция с Pydantic моделями (color_to_dict / color_from_dict)
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    COLOR_SCHEMA_PATH,
    ColorContractValidator,
    color_from_dict,
    color_to_dict,
    load_color_schema,
    validate_color,
)
from src.core.domain import COLOR_MODELS, ColorCMYK, ColorHCY, ColorRGB


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_hcy():
    """Валидный сериализованный HCY цвет."""
    return {"model": "HCY", "channels": {"h": 0.1, "c": 0.4, "y": 0.5}, "alpha": 0.8}


@pytest.fixture
def validator():
    return ColorContractValidator()


# =============================================================================
# ТЕСТЫ: ЗАГРУЗКА СХЕМЫ
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки color схемы"""

    def test_load_color_schema(self):
        schema = load_color_schema()
        assert schema["title"] == "color"

    def test_default_path(self):
        assert COLOR_SCHEMA_PATH.name == "color.json"
        assert COLOR_SCHEMA_PATH.exists()

    def test_missing_schema(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_color_schema(tmp_path / "does_not_exist.json")

    def test_invalid_schema(self, tmp_path):
        broken = tmp_path / "broken.json"
        broken.write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_color_schema(broken)

    def test_schema_out_of_sync_with_models(self, tmp_path):
        """Схема без одной из моделей реестра отклоняется"""
        schema = json.loads(COLOR_SCHEMA_PATH.read_text(encoding="utf-8"))
        schema["allOf"] = schema["allOf"][:-1]
        partial = tmp_path / "color.json"
        partial.write_text(json.dumps(schema), encoding="utf-8")
        with pytest.raises(ValueError, match="does not match"):
            ColorContractValidator(partial)


# =============================================================================
# ТЕСТЫ: ВАЛИДАЦИЯ
# =============================================================================


class TestColorContract:
    """Тесты color контракта"""

    def test_valid(self, validator, valid_hcy):
        validator.validate(valid_hcy)
        assert validator.is_valid(valid_hcy)

    def test_alpha_optional(self, valid_hcy):
        del valid_hcy["alpha"]
        validate_color(valid_hcy)

    def test_unknown_model(self, validator, valid_hcy):
        valid_hcy["model"] = "LAB"
        assert not validator.is_valid(valid_hcy)

    def test_missing_channel(self, validator, valid_hcy):
        del valid_hcy["channels"]["y"]
        assert not validator.is_valid(valid_hcy)

    def test_foreign_channel(self, validator, valid_hcy):
        """Канал другой модели запрещён"""
        valid_hcy["channels"]["v"] = 0.5
        assert not validator.is_valid(valid_hcy)

    def test_hue_one_rejected(self, validator, valid_hcy):
        valid_hcy["channels"]["h"] = 1.0
        with pytest.raises(ValidationError):
            validator.validate(valid_hcy)

    @pytest.mark.parametrize("value", [-0.1, 1.1])
    def test_channel_out_of_range(self, validator, valid_hcy, value):
        valid_hcy["channels"]["c"] = value
        assert not validator.is_valid(valid_hcy)

    def test_alpha_out_of_range(self, validator, valid_hcy):
        valid_hcy["alpha"] = 2.0
        assert not validator.is_valid(valid_hcy)

    def test_additional_properties(self, validator, valid_hcy):
        valid_hcy["gamma"] = 2.2
        assert not validator.is_valid(valid_hcy)

    def test_error_messages(self, validator, valid_hcy):
        """Каждое нарушение указывает путь"""
        valid_hcy["channels"]["c"] = 1.5
        valid_hcy["alpha"] = -1
        messages = validator.error_messages(valid_hcy)
        assert len(messages) == 2
        assert messages[0].startswith("alpha: ")
        assert messages[1].startswith("channels/c: ")

    def test_error_messages_empty_for_valid(self, validator, valid_hcy):
        assert validator.error_messages(valid_hcy) == []


# =============================================================================
# ТЕСТЫ: ИНТЕГРАЦИЯ С МОДЕЛЯМИ
# =============================================================================


class TestModelIntegration:
    """Тесты color_to_dict / color_from_dict"""

    def test_to_dict(self):
        data = color_to_dict(ColorCMYK(c=0.1, m=0.2, y=0.3, k=0.4, a=0.5))
        assert data == {
            "model": "CMYK",
            "channels": {"c": 0.1, "m": 0.2, "y": 0.3, "k": 0.4},
            "alpha": 0.5,
        }
        validate_color(data)

    def test_from_dict(self, valid_hcy):
        color = color_from_dict(valid_hcy)
        assert color == ColorHCY(h=0.1, c=0.4, y=0.5, a=0.8)

    def test_from_dict_default_alpha(self):
        color = color_from_dict({"model": "RGB", "channels": {"r": 0.0, "g": 0.5, "b": 1.0}})
        assert color == ColorRGB(r=0.0, g=0.5, b=1.0)

    def test_from_dict_invalid(self):
        with pytest.raises(ValidationError):
            color_from_dict({"model": "RGB", "channels": {"r": 0.0, "g": 0.5}})

    @pytest.mark.parametrize("model", list(COLOR_MODELS.values()))
    def test_every_model_serializes(self, model):
        color = model.from_rgb(ColorRGB(r=0.3, g=0.6, b=0.2, a=0.9))
        assert color_from_dict(color_to_dict(color)) == color
