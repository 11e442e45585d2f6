# datacompare/models.py
"""
Modelos de datos del motor de comparación.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from functools import cached_property
from typing import Any, Callable, Dict, List, Optional, Tuple, Union


class _Undefined:
    """Marcador de valor ausente (distinto de None / null)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


COMPARE_KEYWORDS = {
    "EXACT": "{{compare:exact}}",
    "IGNORE": "{{compare:ignore}}",
    "IGNORE_REST": "{{compare:ignoreRest}}",
    "IGNORE_ORDER": "{{compare:ignoreOrder}}",
}


class CompareErrorType(Enum):
    MISSING_PROPERTY = "MISSING_PROPERTY"
    EXTRA_PROPERTY = "EXTRA_PROPERTY"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    VALUE_MISMATCH = "VALUE_MISMATCH"
    PATTERN_MISMATCH = "PATTERN_MISMATCH"
    RANGE_EXCEEDED = "RANGE_EXCEEDED"
    ARRAY_LENGTH_MISMATCH = "ARRAY_LENGTH_MISMATCH"
    ARRAY_ELEMENT_MISMATCH = "ARRAY_ELEMENT_MISMATCH"
    REFERENCE_UNRESOLVED = "REFERENCE_UNRESOLVED"    # Reservado
    REFERENCE_AMBIGUOUS = "REFERENCE_AMBIGUOUS"      # Reservado
    DIRECTIVE_ERROR = "DIRECTIVE_ERROR"


class TimeUnit(Enum):
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


@dataclass(frozen=True)
class ParsedTransform:
    """Transformación declarada tras un '|' en una directiva."""
    name: str
    params: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedDirective:
    """Directiva {{compare:...}} ya tokenizada."""
    original: str
    action: str
    args: List[str] = field(default_factory=list)
    transforms: List[ParsedTransform] = field(default_factory=list)


def _join_path(path: List[str]) -> str:
    return ".".join(path) or "root"


def _render(value: Any) -> Any:
    """Convierte valores internos a algo serializable."""
    if value is UNDEFINED:
        return None
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(frozen=True)
class CompareError:
    """Error de comparación normalizado."""
    path: str
    type: CompareErrorType
    expected: Any
    actual: Any
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "type": self.type.value,
            "expected": _render(self.expected),
            "actual": _render(self.actual),
            "message": self.message
        }


@dataclass(frozen=True)
class CompareDetail:
    """Registro de una comprobación individual."""
    path: str
    passed: bool
    expected: Any
    actual: Any
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "passed": self.passed,
            "expected": _render(self.expected),
            "actual": _render(self.actual),
            "message": self.message
        }


@dataclass(frozen=True)
class CompareStats:
    """Estadísticas derivadas de los registros de errores y detalles."""
    total_checks: int = 0
    passed_checks: int = 0
    failed_checks: int = 0
    duration: float = 0.0                     # milisegundos
    max_depth_reached: Optional[int] = None

    @classmethod
    def from_logs(
        cls,
        errors: List[CompareError],
        details: List[CompareDetail],
        duration: float,
        max_depth_reached: Optional[int] = None
    ) -> "CompareStats":
        passed = sum(1 for detail in details if detail.passed)
        failed = len(errors)
        return cls(
            total_checks=passed + failed,
            passed_checks=passed,
            failed_checks=failed,
            duration=duration,
            max_depth_reached=max_depth_reached
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalChecks": self.total_checks,
            "passedChecks": self.passed_checks,
            "failedChecks": self.failed_checks,
            "duration": self.duration,
            "maxDepthReached": self.max_depth_reached
        }


@dataclass
class CompareResult:
    """Resultado completo de una comparación."""
    success: bool
    errors: List[CompareError] = field(default_factory=list)
    details: List[CompareDetail] = field(default_factory=list)
    stats: CompareStats = field(default_factory=CompareStats)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario con las claves del contrato externo."""
        return {
            "success": self.success,
            "errors": [error.to_dict() for error in self.errors],
            "details": [detail.to_dict() for detail in self.details],
            "stats": self.stats.to_dict()
        }


@dataclass(frozen=True)
class IgnorePathConfig:
    """Ruta (con comodín '*') cuyo subárbol se excluye de la comparación."""
    path: Tuple[Union[str, int], ...]
    doc: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Union["IgnorePathConfig", Dict[str, Any]]) -> "IgnorePathConfig":
        if isinstance(data, IgnorePathConfig):
            return data
        return cls(
            path=tuple(data.get("path") or ()),
            doc=tuple(data.get("doc") or ())
        )


# Claves del contrato externo -> atributos
_OPTION_ALIASES = {
    "format": "format",
    "strictMode": "strict_mode",
    "strict_mode": "strict_mode",
    "ignoreExtraProperties": "ignore_extra_properties",
    "ignore_extra_properties": "ignore_extra_properties",
    "maxDepth": "max_depth",
    "max_depth": "max_depth",
    "maxErrors": "max_errors",
    "max_errors": "max_errors",
    "ignorePaths": "ignore_paths",
    "ignore_paths": "ignore_paths",
}


@dataclass(frozen=True)
class CompareOptions:
    """Configuración congelada para una llamada de comparación."""
    format: str = "json"                     # "json", "text", "xml"
    strict_mode: bool = False
    ignore_extra_properties: bool = True
    max_depth: Optional[int] = None
    max_errors: Optional[int] = None
    ignore_paths: Tuple[IgnorePathConfig, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Union["CompareOptions", Dict[str, Any]]]) -> "CompareOptions":
        """Crea opciones desde un diccionario (camelCase o snake_case)."""
        if data is None:
            return cls()
        if isinstance(data, CompareOptions):
            return data

        values: Dict[str, Any] = {}
        for key, value in data.items():
            attribute = _OPTION_ALIASES.get(key)
            if attribute is None or value is None:
                continue
            values[attribute] = value

        if "ignore_paths" in values:
            values["ignore_paths"] = tuple(
                IgnorePathConfig.from_dict(item) for item in values["ignore_paths"]
            )

        return cls(**values)


_CONTEXT_ALIASES = {
    "testcaseId": "testcase_id",
    "testcase_id": "testcase_id",
    "startTimeTest": "start_time_test",
    "start_time_test": "start_time_test",
    "startTimeScript": "start_time_script",
    "start_time_script": "start_time_script",
}


@dataclass
class CompareContext:
    """Contexto ambiental de una comparación (solo lectura durante la misma)."""
    testcase_id: Optional[str] = None
    start_time_test: Optional[Union[str, int, float]] = None
    start_time_script: Optional[Union[str, int, float]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Union["CompareContext", Dict[str, Any]]]) -> "CompareContext":
        if data is None:
            return cls()
        if isinstance(data, CompareContext):
            return data

        known: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            attribute = _CONTEXT_ALIASES.get(key)
            if attribute:
                known[attribute] = value
            else:
                extra[key] = value

        return cls(extra=extra, **known)

    def get(self, key: str, default: Any = None) -> Any:
        """Acceso a datos adicionales del contexto."""
        attribute = _CONTEXT_ALIASES.get(key)
        if attribute:
            value = getattr(self, attribute)
            return default if value is None else value
        return self.extra.get(key, default)

    @cached_property
    def base_time(self) -> datetime:
        """
        Tiempo base para directivas temporales, resuelto una sola vez.

        Prioridad: start_time_test > start_time_script > hora actual.
        """
        from .utils.time_utils import TimeUtils
        return TimeUtils.get_base_time(self)


@dataclass
class MatchContext:
    """Contexto entregado a cada predicado de directiva."""
    path: List[str]
    actual: Any
    expected: Any
    compare_context: CompareContext


@dataclass
class MatchResult:
    """Resultado de evaluar un predicado."""
    success: bool
    error: Optional[str] = None
    details: Optional[str] = None
    matched_value: Any = None
    # Tipo de error a registrar si falla (por defecto PATTERN_MISMATCH)
    error_type: Optional[CompareErrorType] = None


@dataclass
class DirectiveRequest:
    """Solicitud de construcción de un predicado de directiva."""
    directive: ParsedDirective
    context: CompareContext
    registry: Any = None


MatcherFunction = Callable[[Any, Any, MatchContext], MatchResult]


@dataclass
class CompareRequest:
    """Parámetros de una comparación."""
    expected: Any
    actual: Any = UNDEFINED
    context: CompareContext = field(default_factory=CompareContext)
    options: CompareOptions = field(default_factory=CompareOptions)


@dataclass(frozen=True)
class TimeRange:
    """Ventana temporal relativa al tiempo base."""
    before: float
    after: float
    unit: TimeUnit


@dataclass(frozen=True)
class NumberRange:
    min: float
    max: float


@dataclass(frozen=True)
class NumberTolerance:
    value: float
    tolerance: float
    is_percentage: bool = False
