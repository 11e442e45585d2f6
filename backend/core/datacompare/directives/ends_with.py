# datacompare/directives/ends_with.py
"""
Directiva: el texto termina con un patrón.

Ejemplo: {{compare:endsWith:@example.com}}
"""

from .string_pattern import StringPatternDirective


class EndsWithDirective(StringPatternDirective):
    """Valida que el texto termine con el patrón."""

    verb = "termina con"

    def __init__(self):
        super().__init__(
            name="endsWith",
            description="Valida que el texto termine con un patrón"
        )

    def matches(self, actual: str, pattern: str) -> bool:
        return actual.endswith(pattern)
