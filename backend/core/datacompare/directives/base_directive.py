# datacompare/directives/base_directive.py
"""
Contrato base para todas las directivas de comparación.
"""

from abc import ABC, abstractmethod

from ..errors import DirectiveConfigurationError
from ..models import DirectiveRequest, MatcherFunction


class CompareDirective(ABC):
    """Interfaz base para directivas."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    @abstractmethod
    def create_matcher(self, request: DirectiveRequest) -> MatcherFunction:
        """
        Construye el predicado de la directiva.

        Args:
            request: Directiva parseada, contexto y registro

        Returns:
            Función (actual, expected, match_context) -> MatchResult

        Raises:
            DirectiveConfigurationError: si los argumentos son inválidos
        """
        pass

    def invalid(self, message: str) -> DirectiveConfigurationError:
        """Construye el error de configuración de esta directiva."""
        return DirectiveConfigurationError(self.name, message)

    def __repr__(self) -> str:
        return f"<Directive {self.name}: {self.description}>"
