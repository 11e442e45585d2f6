# datacompare/directives/__init__.py
"""
Exporta todas las directivas de comparación.
"""

from .base_directive import CompareDirective
from .string_pattern import StringPatternDirective
from .starts_with import StartsWithDirective
from .ends_with import EndsWithDirective
from .contains import ContainsDirective
from .regex import RegexDirective
from .number import NumberDirective
from .time import TimeDirective

# Directivas incluidas en el motor por defecto
ALL_DIRECTIVES = {
    "startsWith": StartsWithDirective,
    "endsWith": EndsWithDirective,
    "contains": ContainsDirective,
    "regex": RegexDirective,
    "number": NumberDirective,
    "time": TimeDirective
}

__all__ = [
    'CompareDirective',
    'StringPatternDirective',
    'StartsWithDirective',
    'EndsWithDirective',
    'ContainsDirective',
    'RegexDirective',
    'NumberDirective',
    'TimeDirective',
    'ALL_DIRECTIVES'
]
