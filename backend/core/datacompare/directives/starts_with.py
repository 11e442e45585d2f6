# datacompare/directives/starts_with.py
"""
Directiva: el texto empieza con un patrón.

Ejemplo: {{compare:startsWith:Hello}}
"""

from .string_pattern import StringPatternDirective


class StartsWithDirective(StringPatternDirective):
    """Valida que el texto empiece con el patrón."""

    verb = "empieza con"

    def __init__(self):
        super().__init__(
            name="startsWith",
            description="Valida que el texto empiece con un patrón"
        )

    def matches(self, actual: str, pattern: str) -> bool:
        return actual.startswith(pattern)
