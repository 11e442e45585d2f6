# datacompare/directives/number.py
"""
Directiva numérica: rangos y tolerancias.

Ejemplos:
    {{compare:number:range:0:100}}        -> número entre 0 y 100
    {{compare:number:tolerance:42:±5}}    -> 42 ± 5 (37-47)
    {{compare:number:tolerance:100:±10%}} -> 100 ± 10% (90-110)
"""

from typing import Any, List

from .base_directive import CompareDirective
from ..errors import _type_name
from ..models import (
    CompareErrorType, DirectiveRequest, MatchContext, MatchResult, MatcherFunction
)
from ..utils.number_utils import NumberUtils


class NumberDirective(CompareDirective):
    """Valida números contra un rango o una tolerancia."""

    MODES = ("range", "tolerance")

    def __init__(self):
        super().__init__(
            name="number",
            description="Valida números por rango inclusivo o tolerancia"
        )

    def create_matcher(self, request: DirectiveRequest) -> MatcherFunction:
        args = request.directive.args
        if not args:
            raise self.invalid("requiere al menos un argumento")

        mode = args[0]
        if mode == "range":
            return self._create_range_matcher(args[1:])
        if mode == "tolerance":
            return self._create_tolerance_matcher(args[1:])

        raise self.invalid(f"modo desconocido '{mode}'. Modos disponibles: {', '.join(self.MODES)}")

    def _create_range_matcher(self, args: List[str]) -> MatcherFunction:
        if len(args) < 2:
            raise self.invalid("number:range requiere 2 argumentos: min y max")

        try:
            number_range = NumberUtils.parse_number_range(args[0], args[1])
        except ValueError as e:
            raise self.invalid(str(e)) from e

        range_text = NumberUtils.format_range(number_range)

        def matcher(actual: Any, expected: Any, context: MatchContext) -> MatchResult:
            if not NumberUtils.is_number(actual):
                return MatchResult(
                    success=False,
                    error=f"Se esperaba number, se obtuvo {_type_name(actual)}"
                )

            in_range, distance = NumberUtils.is_number_in_range(actual, number_range)
            if in_range:
                return MatchResult(
                    success=True,
                    details=f"El número {NumberUtils.format_number(actual)} está dentro del rango {range_text}",
                    matched_value=actual
                )

            return MatchResult(
                success=False,
                error=(
                    f"El número {NumberUtils.format_number(actual)} está fuera del rango {range_text} "
                    f"(distancia: {NumberUtils.format_number(distance)})"
                ),
                error_type=CompareErrorType.RANGE_EXCEEDED
            )

        return matcher

    def _create_tolerance_matcher(self, args: List[str]) -> MatcherFunction:
        if len(args) < 2:
            raise self.invalid("number:tolerance requiere 2 argumentos: valor y tolerancia")

        try:
            spec = NumberUtils.parse_number_tolerance(args[0], args[1])
        except ValueError as e:
            raise self.invalid(str(e)) from e

        tolerance_text = NumberUtils.format_tolerance(spec)

        def matcher(actual: Any, expected: Any, context: MatchContext) -> MatchResult:
            if not NumberUtils.is_number(actual):
                return MatchResult(
                    success=False,
                    error=f"Se esperaba number, se obtuvo {_type_name(actual)}"
                )

            within, difference, allowed = NumberUtils.is_number_within_tolerance(actual, spec)
            summary = f"(diferencia: {difference:.2f}, permitida: {allowed:.2f})"

            if within:
                return MatchResult(
                    success=True,
                    details=f"El número {NumberUtils.format_number(actual)} está dentro de la tolerancia {tolerance_text} {summary}",
                    matched_value=actual
                )

            return MatchResult(
                success=False,
                error=f"El número {NumberUtils.format_number(actual)} excede la tolerancia {tolerance_text} {summary}",
                error_type=CompareErrorType.RANGE_EXCEEDED
            )

        return matcher
