# reporting/formatters/json_formatter.py
"""
Formateador JSON para reportes.
"""

import json

from .base_formatter import BaseFormatter
from ...models import CompareResult


class JSONFormatter(BaseFormatter):
    """Formatea resultados a JSON con las claves del contrato externo."""

    def format(self, result: CompareResult) -> str:
        # Valores no serializables (fechas, objetos propios) se escriben como texto
        return json.dumps(
            result.to_dict(),
            indent=2,
            ensure_ascii=False,
            default=str
        )

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def file_extension(self) -> str:
        return ".json"
