# datacompare/directives/contains.py
"""
Directiva: el texto contiene un fragmento.

Ejemplo: {{compare:contains:ERROR}}
"""

from .string_pattern import StringPatternDirective


class ContainsDirective(StringPatternDirective):
    """Valida que el texto contenga el fragmento."""

    verb = "contiene"

    def __init__(self):
        super().__init__(
            name="contains",
            description="Valida que el texto contenga un fragmento"
        )

    def matches(self, actual: str, pattern: str) -> bool:
        return pattern in actual
