# reporting/formatters/summary_formatter.py
"""
Formateador de resumen en texto plano.
"""

from collections import Counter

from .base_formatter import BaseFormatter
from ...models import CompareResult


class SummaryFormatter(BaseFormatter):
    """Resumen de una línea con los tipos de error más frecuentes."""

    def __init__(self, top_errors: int = 3):
        self.top_errors = top_errors

    def format(self, result: CompareResult) -> str:
        stats = result.stats
        status = "OK" if result.success else "FALLIDA"
        summary = (
            f"Comparación {status}: {stats.passed_checks}/{stats.total_checks} "
            f"comprobaciones correctas, {stats.failed_checks} errores"
        )

        if result.errors:
            counts = Counter(error.type.value for error in result.errors)
            most_common = ", ".join(
                f"{error_type} ({count})" for error_type, count in counts.most_common(self.top_errors)
            )
            summary += f". Más frecuentes: {most_common}"

        return summary

    @property
    def format_name(self) -> str:
        return "summary"

    @property
    def file_extension(self) -> str:
        return ".txt"
