# datacompare/directives/time.py
"""
Directiva temporal: ventanas y coincidencia exacta respecto al tiempo base.

Ejemplos:
    {{compare:time:range:-300:+300:seconds}} -> 5 minutos antes o después
    {{compare:time:range:+60:minutes}}       -> hasta 60 minutos en el futuro
    {{compare:time:range:-60:minutes}}       -> hasta 60 minutos en el pasado
    {{compare:time:exact}}                   -> igual al tiempo base
    {{compare:time:exact:630:seconds}}       -> tiempo base + 630 segundos
"""

from typing import Any, List

from .base_directive import CompareDirective
from ..models import (
    CompareErrorType, DirectiveRequest, MatchContext, MatchResult, MatcherFunction,
    TimeRange, TimeUnit
)
from ..utils.number_utils import NumberUtils
from ..utils.time_utils import TimeUtils


class TimeDirective(CompareDirective):
    """Valida timestamps relativos al tiempo base del contexto."""

    MODES = ("range", "exact")

    def __init__(self):
        super().__init__(
            name="time",
            description="Valida timestamps por ventana o desplazamiento exacto"
        )

    def create_matcher(self, request: DirectiveRequest) -> MatcherFunction:
        args = request.directive.args
        if not args:
            raise self.invalid("requiere al menos un argumento")

        mode = args[0]
        if mode == "range":
            return self._create_range_matcher(args[1:])
        if mode == "exact":
            return self._create_exact_matcher(args[1:])

        raise self.invalid(f"modo desconocido '{mode}'. Modos disponibles: {', '.join(self.MODES)}")

    def _parse_unit(self, text: str) -> TimeUnit:
        try:
            return TimeUtils.parse_unit(text)
        except ValueError as e:
            raise self.invalid(str(e)) from e

    def _parse_value(self, text: str, label: str) -> float:
        try:
            return NumberUtils.parse_number(text)
        except ValueError as e:
            raise self.invalid(f"{label} inválido: {text}") from e

    def _create_range_matcher(self, args: List[str]) -> MatcherFunction:
        """
        Formatos de argumentos:
            ["-300", "+300", "seconds"] -> ventana combinada
            ["+60", "seconds"]          -> solo futuro
            ["-60", "seconds"]          -> solo pasado
        """
        if len(args) < 2:
            raise self.invalid("time:range requiere al menos 2 argumentos")
        if len(args) > 3:
            raise self.invalid(f"time:range admite 2 o 3 argumentos, se recibieron {len(args)}")

        unit = self._parse_unit(args[-1])

        if len(args) == 3:
            before = self._parse_value(args[0], "Valor de rango")
            after = self._parse_value(args[1], "Valor de rango")
            time_range = TimeRange(before=before, after=after, unit=unit)
        else:
            value = self._parse_value(args[0], "Valor de rango")
            if value >= 0:
                time_range = TimeRange(before=0, after=value, unit=unit)
            else:
                time_range = TimeRange(before=value, after=0, unit=unit)

        range_text = TimeUtils.format_range(time_range)

        def matcher(actual: Any, expected: Any, context: MatchContext) -> MatchResult:
            try:
                actual_time = TimeUtils.parse_timestamp(actual)
                base_time = context.compare_context.base_time
            except ValueError as e:
                return MatchResult(success=False, error=f"Error al interpretar tiempo: {e}")

            in_range, difference = TimeUtils.is_time_in_range(actual_time, base_time, time_range)
            if in_range:
                return MatchResult(
                    success=True,
                    details=f"Tiempo dentro del rango {range_text} (diferencia: {difference:.2f} {unit.value})",
                    matched_value=actual
                )

            return MatchResult(
                success=False,
                error=f"Tiempo fuera del rango {range_text}. Diferencia: {difference:.2f} {unit.value}",
                error_type=CompareErrorType.RANGE_EXCEEDED
            )

        return matcher

    def _create_exact_matcher(self, args: List[str]) -> MatcherFunction:
        """
        Formatos de argumentos:
            []                  -> tiempo base
            ["630", "seconds"]  -> tiempo base + 630 segundos
        """
        offset = 0.0
        unit = TimeUnit.SECONDS

        if args:
            if len(args) != 2:
                raise self.invalid("time:exact con desplazamiento requiere exactamente 2 argumentos: desplazamiento y unidad")
            offset = self._parse_value(args[0], "Desplazamiento")
            unit = self._parse_unit(args[1])

        if offset == 0:
            offset_text = "baseTime"
        else:
            offset_text = f"baseTime + {NumberUtils.format_number(offset)} {unit.value}"

        def matcher(actual: Any, expected: Any, context: MatchContext) -> MatchResult:
            try:
                actual_time = TimeUtils.parse_timestamp(actual)
                base_time = context.compare_context.base_time
                expected_time = TimeUtils.calculate_time(base_time, offset, unit)
            except (ValueError, OverflowError) as e:
                return MatchResult(success=False, error=f"Error al interpretar tiempo: {e}")

            diff = TimeUtils.diff_milliseconds(
                TimeUtils.truncate_to_millis(actual_time),
                TimeUtils.truncate_to_millis(expected_time)
            )

            if diff == 0:
                return MatchResult(
                    success=True,
                    details=f"El tiempo coincide exactamente ({offset_text})",
                    matched_value=actual
                )

            return MatchResult(
                success=False,
                error=f"Tiempo distinto. Esperado {offset_text}, diferencia: {NumberUtils.format_number(diff)} milisegundos"
            )

        return matcher
