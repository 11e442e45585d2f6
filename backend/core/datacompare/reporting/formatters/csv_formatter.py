# reporting/formatters/csv_formatter.py
"""
Formateador CSV para reportes.

Una fila por error y una por detalle, con columnas en español.
"""

import csv
import io
import json
from typing import Any

from .base_formatter import BaseFormatter
from ...models import CompareResult, UNDEFINED


HEADER = [
    "ruta",
    "resultado",
    "tipo",
    "mensaje",
    "valor_esperado",
    "valor_actual"
]


def _cell(value: Any) -> str:
    if value is None or value is UNDEFINED:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


class CSVFormatter(BaseFormatter):
    """Formatea resultados a CSV."""

    def format(self, result: CompareResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL)
        writer.writerow(HEADER)

        for error in result.errors:
            writer.writerow([
                error.path,
                "ERROR",
                error.type.value,
                error.message,
                _cell(error.expected),
                _cell(error.actual)
            ])

        for detail in result.details:
            writer.writerow([
                detail.path,
                "OK" if detail.passed else "ERROR",
                "",
                detail.message or "",
                _cell(detail.expected),
                _cell(detail.actual)
            ])

        return output.getvalue()

    @property
    def format_name(self) -> str:
        return "csv"

    @property
    def file_extension(self) -> str:
        return ".csv"
