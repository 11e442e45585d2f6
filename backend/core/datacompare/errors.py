# datacompare/errors.py
"""
Excepciones y errores normalizados del motor de comparación.
"""

from typing import Any, List, Optional

from .models import CompareError, CompareErrorType, UNDEFINED, _join_path


class DataCompareError(Exception):
    """Error base para todos los errores del motor."""


class DirectiveParseError(DataCompareError):
    """Error cuando un texto no cumple la gramática de directivas."""

    def __init__(self, message: str, directive: Optional[str] = None):
        self.directive = directive
        context = f" (directiva: {directive})" if directive is not None else ""
        super().__init__(f"{message}{context}")


class DirectiveConfigurationError(DataCompareError):
    """Error cuando los argumentos de una directiva son inválidos."""

    def __init__(self, directive_name: str, message: str):
        self.directive_name = directive_name
        super().__init__(f"{directive_name}: {message}")


class RegistryError(DataCompareError):
    """Error base del registro."""

    def __init__(self, message: str, category: str, name: str):
        self.category = category
        self.name = name
        super().__init__(message)


class DuplicateRegistrationError(RegistryError):
    """Se intentó registrar un nombre ya existente."""

    def __init__(self, category: str, name: str):
        super().__init__(f"{category} '{name}' ya está registrado", category, name)


class UnknownRegistrationError(RegistryError, KeyError):
    """Se pidió un nombre no registrado."""

    def __init__(self, category: str, name: str):
        super().__init__(f"{category} desconocido: {name}", category, name)

    def __str__(self) -> str:
        return self.args[0]


def _type_name(value: Any) -> str:
    """Nombre de tipo en el vocabulario del contrato (JSON)."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class CompareErrors:
    """Factory de errores de comparación."""

    @staticmethod
    def root_undefined() -> CompareError:
        return CompareError(
            path="root",
            type=CompareErrorType.MISSING_PROPERTY,
            expected="any value",
            actual=UNDEFINED,
            message="El valor actual es undefined"
        )

    @staticmethod
    def max_depth_exceeded(path: List[str], expected: Any, actual: Any, max_depth: int) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.DIRECTIVE_ERROR,
            expected=expected,
            actual=actual,
            message=f"Profundidad máxima {max_depth} excedida"
        )

    @staticmethod
    def recursion_limit_exceeded(path: List[str], expected: Any, actual: Any) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.DIRECTIVE_ERROR,
            expected=expected,
            actual=actual,
            message="Límite de recursión alcanzado: estructura demasiado profunda"
        )

    @staticmethod
    def value_mismatch(path: List[str], expected: Any, actual: Any) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.VALUE_MISMATCH,
            expected=expected,
            actual=actual,
            message=f"Valor distinto: esperado {expected!r}, actual {actual!r}"
        )

    @staticmethod
    def type_mismatch(path: List[str], expected_type: str, actual: Any) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.TYPE_MISMATCH,
            expected=expected_type,
            actual=_type_name(actual),
            message=f"Se esperaba {expected_type}, se obtuvo {_type_name(actual)}"
        )

    @staticmethod
    def missing_property(path: List[str], key: str, expected: Any) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.MISSING_PROPERTY,
            expected=expected,
            actual=UNDEFINED,
            message=f"Propiedad '{key}' ausente en el objeto actual"
        )

    @staticmethod
    def extra_property(path: List[str], key: str, actual: Any) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.EXTRA_PROPERTY,
            expected=UNDEFINED,
            actual=actual,
            message=f"Propiedad adicional '{key}' en el objeto actual"
        )

    @staticmethod
    def pattern_mismatch(path: List[str], directive: str, actual: Any, reason: Optional[str]) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.PATTERN_MISMATCH,
            expected=directive,
            actual=actual,
            message=reason or "La directiva no coincide"
        )

    @staticmethod
    def directive_failed(path: List[str], directive: str, actual: Any, details: str = "") -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.DIRECTIVE_ERROR,
            expected=directive,
            actual=actual,
            message=f"Error de directiva: {details}"
        )

    @staticmethod
    def array_length_mismatch(path: List[str], expected_length: int, actual_length: int) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.ARRAY_LENGTH_MISMATCH,
            expected=expected_length,
            actual=actual_length,
            message=f"Longitud de array distinta: esperado {expected_length}, actual {actual_length}"
        )

    @staticmethod
    def array_too_short(path: List[str], expected_length: int, actual_length: int) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.ARRAY_LENGTH_MISMATCH,
            expected=f"at least {expected_length}",
            actual=actual_length,
            message=(
                f"Array demasiado corto: se esperaban al menos {expected_length} "
                f"elementos, se obtuvieron {actual_length}"
            )
        )

    @staticmethod
    def array_element_unmatched(path: List[str], expected: Any) -> CompareError:
        return CompareError(
            path=_join_path(path),
            type=CompareErrorType.ARRAY_ELEMENT_MISMATCH,
            expected=expected,
            actual=UNDEFINED,
            message="Ningún elemento del array actual coincide"
        )
