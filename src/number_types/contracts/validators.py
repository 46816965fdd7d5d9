"""
JSON Schema Contract Validators

Модуль для валидации сериализованной формы bounded-типов. Контракт каждого
типа выводится из самой Pydantic модели (model_json_schema), поэтому схема
не может разойтись с тем, что реально пишет model_dump_json().

Каноническая сериализация каждого типа — голое JSON-число, а не объект.
Контракты не задают minimum/maximum: выход за диапазон исправляется при
десериализации (clamp/wrap), а не отклоняется.
"""

import json
import logging
from typing import Any, Dict, Iterator, Type

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import RootModel

from number_types.domain.bipolar import BipolarFloat
from number_types.domain.phase import Phase
from number_types.domain.unipolar import UnipolarFloat

logger = logging.getLogger(__name__)


# =============================================================================
# CONTRACT DERIVATION
# =============================================================================

# Кэш выведенных контрактов по имени модели
_CONTRACTS: Dict[str, Dict[str, Any]] = {}


def contract_schema(model: Type[RootModel]) -> Dict[str, Any]:
    """
    JSON Schema контракта для сериализованной формы модели.

    Схема строится из model_json_schema(mode="serialization") и проходит
    meta-validation по Draft 2020-12. Результат кэшируется.

    Args:
        model: Pydantic RootModel (UnipolarFloat, BipolarFloat, Phase)

    Returns:
        Схема как dict

    Raises:
        ValueError: Если схема не проходит meta-validation или формы
            сериализации и десериализации расходятся по типу
    """
    name = model.__name__
    if name in _CONTRACTS:
        return _CONTRACTS[name]

    schema = model.model_json_schema(mode="serialization")
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema for {name}: {e}") from e

    # Что пишется, то и читается: голое число в обе стороны
    decoded_type = model.model_json_schema(mode="validation").get("type")
    if schema.get("type") != decoded_type:
        raise ValueError(
            f"Serialization and validation schemas of {name} disagree: "
            f"{schema.get('type')!r} != {decoded_type!r}"
        )

    logger.debug("Derived contract for %s: %s", name, schema)
    _CONTRACTS[name] = schema
    return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против схемы модели.
    """

    def __init__(self, model: Type[RootModel]):
        """
        Args:
            model: Модель, чья сериализованная форма проверяется
        """
        self.model = model
        self.schema = contract_schema(model)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Декодированный JSON (для bounded-типов — число)

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.warning(
                "Payload rejected by %s contract: %s", self.model.__name__, e.message
            )
            raise

    def validate_dump(self, instance: RootModel) -> None:
        """
        Проверка того, что model_dump_json() экземпляра удовлетворяет контракту.

        Raises:
            TypeError: Если экземпляр не является моделью валидатора
            ValidationError: Если сериализованная форма не соответствует схеме
        """
        if not isinstance(instance, self.model):
            raise TypeError(
                f"Expected {self.model.__name__}, got {type(instance).__name__}"
            )
        self.validate(json.loads(instance.model_dump_json()))

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class UnipolarFloatValidator(ContractValidator):
    """Валидатор сериализованного UnipolarFloat."""

    def __init__(self):
        super().__init__(UnipolarFloat)


class BipolarFloatValidator(ContractValidator):
    """Валидатор сериализованного BipolarFloat."""

    def __init__(self):
        super().__init__(BipolarFloat)


class PhaseValidator(ContractValidator):
    """Валидатор сериализованной Phase."""

    def __init__(self):
        super().__init__(Phase)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_unipolar_float(data: Any) -> None:
    """
    Валидация сериализованного UnipolarFloat.

    Raises:
        ValidationError: Если данные не являются JSON-числом
    """
    UnipolarFloatValidator().validate(data)


def validate_bipolar_float(data: Any) -> None:
    """
    Валидация сериализованного BipolarFloat.

    Raises:
        ValidationError: Если данные не являются JSON-числом
    """
    BipolarFloatValidator().validate(data)


def validate_phase(data: Any) -> None:
    """
    Валидация сериализованной Phase.

    Raises:
        ValidationError: Если данные не являются JSON-числом
    """
    PhaseValidator().validate(data)
