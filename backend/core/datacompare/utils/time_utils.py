# datacompare/utils/time_utils.py
"""
Utilidades para rangos temporales y cálculo de tiempos base.
"""

import calendar
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Tuple

from .number_utils import NumberUtils
from ..models import TimeRange, TimeUnit


# Factores fijos a milisegundos (mes = 30 días, año = 365 días)
_UNIT_MILLISECONDS = {
    TimeUnit.MILLISECONDS: 1,
    TimeUnit.SECONDS: 1000,
    TimeUnit.MINUTES: 60 * 1000,
    TimeUnit.HOURS: 60 * 60 * 1000,
    TimeUnit.DAYS: 24 * 60 * 60 * 1000,
    TimeUnit.WEEKS: 7 * 24 * 60 * 60 * 1000,
    TimeUnit.MONTHS: 30 * 24 * 60 * 60 * 1000,
    TimeUnit.YEARS: 365 * 24 * 60 * 60 * 1000,
}

# Por debajo de este valor un timestamp numérico se interpreta en segundos
_SECONDS_THRESHOLD = 10_000_000_000

VALID_UNITS = [unit.value for unit in TimeUnit]


class TimeUtils:
    """Aritmética de tiempos para las directivas temporales."""

    @staticmethod
    def parse_unit(text: str) -> TimeUnit:
        """
        Raises:
            ValueError: si la unidad no es una de las ocho reconocidas
        """
        try:
            return TimeUnit(text)
        except ValueError:
            raise ValueError(f"Unidad de tiempo inválida '{text}'. Unidades válidas: {', '.join(VALID_UNITS)}")

    @staticmethod
    def parse_time_range(range_spec: str, unit: TimeUnit) -> TimeRange:
        """
        Parsea una ventana temporal.

        Formatos:
            "-60:+60" -> pasado y futuro
            "+60"     -> solo futuro  [0, 60]
            "-60"     -> solo pasado  [-60, 0]
        """
        if ":" in range_spec:
            before_text, after_text = range_spec.split(":", 1)
            try:
                before = NumberUtils.parse_number(before_text)
                after = NumberUtils.parse_number(after_text)
            except ValueError:
                raise ValueError(f"Rango temporal inválido: {range_spec}")
            return TimeRange(before=before, after=after, unit=unit)

        try:
            value = NumberUtils.parse_number(range_spec)
        except ValueError:
            raise ValueError(f"Rango temporal inválido: {range_spec}")

        if value >= 0:
            return TimeRange(before=0, after=value, unit=unit)
        return TimeRange(before=value, after=0, unit=unit)

    @staticmethod
    def parse_timestamp(value: Any) -> datetime:
        """
        Convierte un timestamp a datetime UTC.

        Soporta:
            - ISO-8601: "2023-12-01T10:30:00Z" (sin zona se asume UTC)
            - Unix en segundos: 1234567890
            - Unix en milisegundos: 1234567890000
        """
        if isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value.strip())
            except ValueError:
                raise ValueError(f"Timestamp ISO inválido: {value}")
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed.astimezone(timezone.utc)

        if NumberUtils.is_number(value):
            if math.isnan(value) or math.isinf(value):
                raise ValueError(f"Timestamp inválido: {value}")
            seconds = value if value < _SECONDS_THRESHOLD else value / 1000
            try:
                return datetime.fromtimestamp(seconds, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                raise ValueError(f"Timestamp inválido: {value}")

        raise ValueError(f"Tipo de timestamp no soportado: {type(value).__name__}")

    @staticmethod
    def get_base_time(context: Any) -> datetime:
        """
        Obtiene el tiempo base del contexto.

        Prioridad: start_time_test > start_time_script > hora actual.
        """
        start_time_test = getattr(context, "start_time_test", None)
        if start_time_test:
            return TimeUtils.parse_timestamp(start_time_test)

        start_time_script = getattr(context, "start_time_script", None)
        if start_time_script:
            return TimeUtils.parse_timestamp(start_time_script)

        return datetime.now(timezone.utc)

    @staticmethod
    def truncate_to_millis(value: datetime) -> datetime:
        return value.replace(microsecond=value.microsecond // 1000 * 1000)

    @staticmethod
    def diff_milliseconds(actual: datetime, base: datetime) -> float:
        """Diferencia con signo (actual - base) en milisegundos."""
        return (actual - base) / timedelta(milliseconds=1)

    @staticmethod
    def diff_in_unit(actual: datetime, base: datetime, unit: TimeUnit) -> float:
        """Diferencia con signo (actual - base) expresada en la unidad."""
        return TimeUtils.diff_milliseconds(actual, base) / _UNIT_MILLISECONDS[unit]

    @staticmethod
    def is_time_in_range(actual: datetime, base: datetime, time_range: TimeRange) -> Tuple[bool, float]:
        """
        Returns:
            (dentro de la ventana inclusiva, diferencia en la unidad del rango)
        """
        difference = TimeUtils.diff_in_unit(actual, base, time_range.unit)
        return time_range.before <= difference <= time_range.after, difference

    @staticmethod
    def calculate_time(base: datetime, offset: float, unit: TimeUnit) -> datetime:
        """
        Suma un desplazamiento al tiempo base.

        Meses y años usan aritmética de calendario para la parte entera
        (el día se ajusta al último día válido del mes); la parte decimal
        se suma con los factores fijos.
        """
        if unit in (TimeUnit.MONTHS, TimeUnit.YEARS):
            whole = int(offset)
            fraction = offset - whole
            months = whole * 12 if unit == TimeUnit.YEARS else whole
            shifted = TimeUtils._add_months(base, months)
            return shifted + timedelta(milliseconds=fraction * _UNIT_MILLISECONDS[unit])

        return base + timedelta(milliseconds=offset * _UNIT_MILLISECONDS[unit])

    @staticmethod
    def _add_months(value: datetime, months: int) -> datetime:
        month_index = value.month - 1 + months
        year = value.year + month_index // 12
        month = month_index % 12 + 1
        day = min(value.day, calendar.monthrange(year, month)[1])
        return value.replace(year=year, month=month, day=day)

    @staticmethod
    def format_range(time_range: TimeRange) -> str:
        before = NumberUtils.format_number(time_range.before)
        after = NumberUtils.format_number(time_range.after)
        unit = time_range.unit.value

        if time_range.before == 0 and time_range.after > 0:
            return f"+{after} {unit}"
        if time_range.after == 0 and time_range.before < 0:
            return f"{before} {unit}"
        return f"{before}:+{after} {unit}"
