# reporting/formatters/__init__.py
"""
Formateadores de reportes.
"""

from .base_formatter import BaseFormatter
from .json_formatter import JSONFormatter
from .csv_formatter import CSVFormatter
from .summary_formatter import SummaryFormatter

FORMATTERS = {
    "json": JSONFormatter,
    "csv": CSVFormatter,
    "summary": SummaryFormatter
}


def get_formatter(format_name: str) -> BaseFormatter:
    """
    Raises:
        ValueError: si el formato no existe
    """
    formatter_class = FORMATTERS.get(format_name)
    if formatter_class is None:
        raise ValueError(
            f"Formato de reporte desconocido: {format_name}. "
            f"Formatos disponibles: {', '.join(FORMATTERS)}"
        )
    return formatter_class()


__all__ = [
    'BaseFormatter',
    'JSONFormatter',
    'CSVFormatter',
    'SummaryFormatter',
    'FORMATTERS',
    'get_formatter'
]
