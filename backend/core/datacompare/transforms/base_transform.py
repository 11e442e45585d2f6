# datacompare/transforms/base_transform.py
"""
Contrato para transformaciones de la cadena '|' de una directiva.

Las transformaciones se registran y se parsean, pero el comparador no las
aplica todavía.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class CompareTransform(ABC):
    """Interfaz base para transformaciones."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def apply(self, value: Any, params: List[str]) -> Any:
        """Devuelve el valor transformado."""
        pass

    def __repr__(self) -> str:
        return f"<Transform {self.name}>"
