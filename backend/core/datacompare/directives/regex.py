# datacompare/directives/regex.py
"""
Directiva: el texto cumple una expresión regular.

Ejemplo: {{compare:regex:user_\\d{5}}}
"""

import re
from typing import Any

from .base_directive import CompareDirective
from ..errors import _type_name
from ..models import DirectiveRequest, MatchContext, MatchResult, MatcherFunction


class RegexDirective(CompareDirective):
    """Valida textos contra una expresión regular (búsqueda, no anclada)."""

    def __init__(self):
        super().__init__(
            name="regex",
            description="Valida que el texto cumpla una expresión regular"
        )

    def create_matcher(self, request: DirectiveRequest) -> MatcherFunction:
        args = request.directive.args
        if not args:
            raise self.invalid("requiere al menos un argumento")

        pattern = ":".join(args)

        # Compilar una sola vez
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise self.invalid(f"patrón regex inválido '{pattern}': {e}") from e

        def matcher(actual: Any, expected: Any, context: MatchContext) -> MatchResult:
            if not isinstance(actual, str):
                return MatchResult(
                    success=False,
                    error=f"Se esperaba string, se obtuvo {_type_name(actual)}"
                )

            if regex.search(actual):
                return MatchResult(
                    success=True,
                    details=f"El texto cumple el patrón /{pattern}/",
                    matched_value=actual
                )

            return MatchResult(
                success=False,
                error=f"Se esperaba un texto que cumpla el patrón /{pattern}/, pero se obtuvo '{actual}'"
            )

        return matcher
