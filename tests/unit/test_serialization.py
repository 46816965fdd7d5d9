"""
Тесты сериализации/десериализации bounded-типов через Pydantic

Проверяет:
1. Каноническую форму — голое число (не объект)
2. Нормализацию при десериализации (clamp/wrap, а не reject)
3. Использование типов как полей других Pydantic моделей
4. JSON Schema, генерируемую Pydantic
5. Roundtrip NaN-фазы (NaN как JSON-константа, а не null)
"""

import json
import math

import pytest
from pydantic import BaseModel, ValidationError

from number_types import BipolarFloat, Phase, UnipolarFloat


class FixtureState(BaseModel):
    """Пример внешней модели с bounded-полями"""

    level: UnipolarFloat
    pan: BipolarFloat
    rotation: Phase

    model_config = {"frozen": True}


class NonFiniteFixtureState(BaseModel):
    """Внешняя модель, допускающая NaN в JSON"""

    rotation: Phase

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}


class TestBareNumberSerialization:
    """Тесты сериализации в голое число"""

    def test_model_dump_is_bare_float(self) -> None:
        """model_dump() возвращает float"""
        assert UnipolarFloat(0.25).model_dump() == 0.25
        assert BipolarFloat(-0.5).model_dump() == -0.5
        assert Phase(1.25).model_dump() == 0.25

    def test_model_dump_json_is_bare_number(self) -> None:
        """model_dump_json() возвращает JSON-число"""
        assert UnipolarFloat(0.25).model_dump_json() == "0.25"
        assert BipolarFloat(-0.5).model_dump_json() == "-0.5"
        assert json.loads(Phase(0.75).model_dump_json()) == 0.75

    def test_phase_one_serializes_as_one(self) -> None:
        """Phase.ONE сериализуется как 1.0"""
        assert Phase.ONE.model_dump_json() == "1.0"


class TestNormalizingDeserialization:
    """Тесты десериализации с нормализацией"""

    @pytest.mark.parametrize(
        "payload, expected",
        [("0.5", 0.5), ("1.5", 1.0), ("-3", 0.0), ("1", 1.0)],
    )
    def test_unipolar_clamps_on_decode(self, payload: str, expected: float) -> None:
        """UnipolarFloat: clamp при декодировании"""
        assert UnipolarFloat.model_validate_json(payload) == expected

    @pytest.mark.parametrize(
        "payload, expected",
        [("-0.5", -0.5), ("-2.5", -1.0), ("7", 1.0)],
    )
    def test_bipolar_clamps_on_decode(self, payload: str, expected: float) -> None:
        """BipolarFloat: clamp при декодировании"""
        assert BipolarFloat.model_validate_json(payload) == expected

    @pytest.mark.parametrize(
        "payload, expected",
        [("0.25", 0.25), ("1.25", 0.25), ("-0.25", 0.75), ("1.0", 0.0)],
    )
    def test_phase_wraps_on_decode(self, payload: str, expected: float) -> None:
        """Phase: wrap при декодировании"""
        assert Phase.model_validate_json(payload) == expected

    def test_model_validate_python(self) -> None:
        """model_validate нормализует так же, как конструктор"""
        assert UnipolarFloat.model_validate(2.0) == UnipolarFloat(2.0)
        assert BipolarFloat.model_validate(-2.0) == BipolarFloat(-2.0)
        assert Phase.model_validate(2.75) == Phase(2.75)

    def test_phase_one_does_not_roundtrip(self) -> None:
        """Phase.ONE после roundtrip становится ZERO (нормализация на входе)"""
        restored = Phase.model_validate_json(Phase.ONE.model_dump_json())
        assert restored == Phase.ZERO

    def test_roundtrip_in_range(self) -> None:
        """Значение в диапазоне переживает roundtrip без изменений"""
        original = BipolarFloat(-0.375)
        assert BipolarFloat.model_validate_json(original.model_dump_json()) == original

    def test_object_form_rejected(self) -> None:
        """Объектная форма не является канонической"""
        with pytest.raises(ValidationError):
            UnipolarFloat.model_validate_json('{"root": 0.5}')

    def test_non_numeric_rejected(self) -> None:
        """Нечисловые значения отклоняются"""
        with pytest.raises(ValidationError):
            Phase.model_validate_json('"quarter"')
        with pytest.raises(ValidationError):
            BipolarFloat.model_validate_json("null")


class TestNonFinitePhaseSerialization:
    """Тесты NaN-фазы в JSON"""

    def test_nan_phase_dumps_as_nan_constant(self) -> None:
        """NaN-фаза пишется как NaN, а не null"""
        nan_phase = Phase(0.5) / UnipolarFloat.ZERO
        assert math.isnan(nan_phase.val())
        assert nan_phase.model_dump_json() == "NaN"

    def test_infinite_input_dumps_as_nan(self) -> None:
        """Phase(inf) хранит NaN и пишется как NaN"""
        assert Phase(float("inf")).model_dump_json() == "NaN"
        assert Phase(float("-inf")).model_dump_json() == "NaN"

    def test_nan_phase_roundtrip(self) -> None:
        """NaN-фаза читается обратно как NaN-фаза"""
        nan_phase = Phase(0.5) / UnipolarFloat.ZERO
        restored = Phase.model_validate_json(nan_phase.model_dump_json())
        assert isinstance(restored, Phase)
        assert math.isnan(restored.val())

    def test_nan_phase_dump_is_loadable(self) -> None:
        """Вывод читается стандартным json.loads"""
        assert math.isnan(json.loads(Phase(float("nan")).model_dump_json()))

    def test_nan_constant_normalizes_bounded_types(self) -> None:
        """NaN во входном JSON нормализуется clamp-ом"""
        assert UnipolarFloat.model_validate_json("NaN") == UnipolarFloat.ZERO
        assert BipolarFloat.model_validate_json("NaN") == BipolarFloat(-1.0)
        assert UnipolarFloat.model_validate_json("Infinity") == UnipolarFloat.ONE

    def test_nested_nan_phase_roundtrip(self) -> None:
        """NaN-фаза внутри внешней модели переживает roundtrip"""
        state = NonFiniteFixtureState(rotation=float("nan"))
        payload = state.model_dump_json()
        assert math.isnan(json.loads(payload)["rotation"])
        restored = NonFiniteFixtureState.model_validate_json(payload)
        assert math.isnan(restored.rotation.val())


class TestNestedModels:
    """Тесты bounded-типов как полей других моделей"""

    def test_fields_normalize_raw_input(self) -> None:
        """Сырые числа нормализуются при создании внешней модели"""
        state = FixtureState(level=1.5, pan=-2.0, rotation=1.25)
        assert isinstance(state.level, UnipolarFloat)
        assert state.level == UnipolarFloat.ONE
        assert state.pan == BipolarFloat(-1.0)
        assert state.rotation == Phase(0.25)

    def test_fields_accept_instances(self) -> None:
        """Готовые экземпляры принимаются как есть"""
        state = FixtureState(
            level=UnipolarFloat(0.5), pan=BipolarFloat(0.25), rotation=Phase.ONE
        )
        assert state.level == 0.5
        assert state.rotation.val() == 1.0

    def test_fields_serialize_as_numbers(self) -> None:
        """Поля сериализуются как голые числа"""
        state = FixtureState(level=0.5, pan=-0.25, rotation=0.75)
        assert state.model_dump() == {"level": 0.5, "pan": -0.25, "rotation": 0.75}
        assert json.loads(state.model_dump_json()) == {
            "level": 0.5,
            "pan": -0.25,
            "rotation": 0.75,
        }

    def test_nested_decode_normalizes(self) -> None:
        """Декодирование внешней модели нормализует поля"""
        state = FixtureState.model_validate_json(
            '{"level": -1, "pan": 3.0, "rotation": -0.25}'
        )
        assert state.level == UnipolarFloat.ZERO
        assert state.pan == BipolarFloat.ONE
        assert state.rotation == Phase(0.75)


class TestGeneratedJsonSchema:
    """Тесты JSON Schema, генерируемой Pydantic"""

    @pytest.mark.parametrize("model", [UnipolarFloat, BipolarFloat, Phase])
    def test_schema_is_number(self, model: type) -> None:
        """Схема описывает число, а не объект"""
        schema = model.model_json_schema()
        assert schema["type"] == "number"
        assert "properties" not in schema
