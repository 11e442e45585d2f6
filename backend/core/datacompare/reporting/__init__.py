# datacompare/reporting/__init__.py
"""
Módulo de reporting para resultados de comparación.
"""

from .formatters import (
    BaseFormatter, JSONFormatter, CSVFormatter, SummaryFormatter,
    FORMATTERS, get_formatter
)

__all__ = [
    'BaseFormatter',
    'JSONFormatter',
    'CSVFormatter',
    'SummaryFormatter',
    'FORMATTERS',
    'get_formatter'
]
