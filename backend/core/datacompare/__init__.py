# datacompare/__init__.py
"""
Micromódulo de comparación de datos guiada por directivas {{compare:...}}.
"""

from .engine import CompareEngine, create_default_engine, compare_data
from .comparer import RecursiveComparer
from .parser import CompareParser, DIRECTIVE_PATTERN
from .registry import CompareRegistry
from .models import (
    UNDEFINED,
    COMPARE_KEYWORDS,
    CompareErrorType,
    TimeUnit,
    ParsedDirective,
    ParsedTransform,
    CompareError,
    CompareDetail,
    CompareStats,
    CompareResult,
    CompareOptions,
    CompareContext,
    CompareRequest,
    IgnorePathConfig,
    MatchContext,
    MatchResult,
    DirectiveRequest
)
from .errors import (
    CompareErrors,
    DataCompareError,
    DirectiveParseError,
    DirectiveConfigurationError,
    RegistryError,
    DuplicateRegistrationError,
    UnknownRegistrationError
)
from .directives import ALL_DIRECTIVES, CompareDirective
from .matchers import CompareMatcher
from .transforms import CompareTransform

__all__ = [
    'CompareEngine',
    'create_default_engine',
    'compare_data',
    'RecursiveComparer',
    'CompareParser',
    'DIRECTIVE_PATTERN',
    'CompareRegistry',
    'UNDEFINED',
    'COMPARE_KEYWORDS',
    'CompareErrorType',
    'TimeUnit',
    'ParsedDirective',
    'ParsedTransform',
    'CompareError',
    'CompareDetail',
    'CompareStats',
    'CompareResult',
    'CompareOptions',
    'CompareContext',
    'CompareRequest',
    'IgnorePathConfig',
    'MatchContext',
    'MatchResult',
    'DirectiveRequest',
    'CompareErrors',
    'DataCompareError',
    'DirectiveParseError',
    'DirectiveConfigurationError',
    'RegistryError',
    'DuplicateRegistrationError',
    'UnknownRegistrationError',
    'ALL_DIRECTIVES',
    'CompareDirective',
    'CompareMatcher',
    'CompareTransform'
]
