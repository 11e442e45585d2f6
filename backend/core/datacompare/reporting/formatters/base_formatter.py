# reporting/formatters/base_formatter.py
"""
Formateador base para reportes de comparación.
"""

from abc import ABC, abstractmethod
from typing import Any

from ...models import CompareResult


class BaseFormatter(ABC):
    """Interfaz base para formateadores de reportes."""

    @abstractmethod
    def format(self, result: CompareResult) -> Any:
        """
        Formatea un resultado de comparación al formato específico.

        Args:
            result: Resultado a formatear

        Returns:
            Datos formateados (depende de la implementación)
        """
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Nombre del formato."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extensión de archivo para este formato."""
        pass
