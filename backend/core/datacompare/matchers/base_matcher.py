# datacompare/matchers/base_matcher.py
"""
Contrato para matchers reutilizables registrados por nombre.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..models import MatchContext, MatchResult


class CompareMatcher(ABC):
    """Interfaz base para matchers."""

    @abstractmethod
    def match(self, actual: Any, expected: Any, context: MatchContext) -> MatchResult:
        """
        Evalúa un valor actual contra el esperado.

        Returns:
            MatchResult con el resultado de la evaluación
        """
        pass
