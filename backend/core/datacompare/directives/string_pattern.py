# datacompare/directives/string_pattern.py
"""
Base común para directivas de patrón de texto (startsWith, endsWith, contains).
"""

from abc import abstractmethod
from typing import Any

from .base_directive import CompareDirective
from ..errors import _type_name
from ..models import DirectiveRequest, MatchContext, MatchResult, MatcherFunction


class StringPatternDirective(CompareDirective):
    """Compara un texto contra un patrón literal."""

    # Verbo usado en los mensajes ("empieza con", "contiene"...)
    verb = ""

    def create_matcher(self, request: DirectiveRequest) -> MatcherFunction:
        args = request.directive.args
        if not args:
            raise self.invalid("requiere al menos un argumento")

        # Los ':' separados como argumentos forman parte del patrón
        pattern = ":".join(args)

        def matcher(actual: Any, expected: Any, context: MatchContext) -> MatchResult:
            if not isinstance(actual, str):
                return MatchResult(
                    success=False,
                    error=f"Se esperaba string, se obtuvo {_type_name(actual)}"
                )

            if self.matches(actual, pattern):
                return MatchResult(
                    success=True,
                    details=f"El texto {self.verb} '{pattern}'",
                    matched_value=actual
                )

            return MatchResult(
                success=False,
                error=f"Se esperaba un texto que {self.verb} '{pattern}', pero se obtuvo '{actual}'"
            )

        return matcher

    @abstractmethod
    def matches(self, actual: str, pattern: str) -> bool:
        pass
