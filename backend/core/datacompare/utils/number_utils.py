# datacompare/utils/number_utils.py
"""
Utilidades para rangos y tolerancias numéricas.
"""

import math
from typing import Any, Tuple

from ..models import NumberRange, NumberTolerance


class NumberUtils:
    """Aritmética de rangos y tolerancias."""

    @staticmethod
    def is_number(value: Any) -> bool:
        """True para int/float; los booleanos no cuentan como números."""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def parse_number(text: str) -> float:
        """
        Convierte un argumento de directiva a número.

        Raises:
            ValueError: si el texto no es numérico
        """
        try:
            value = float(text)
        except (TypeError, ValueError):
            raise ValueError(f"Número inválido: {text}")
        if math.isnan(value):
            raise ValueError(f"Número inválido: {text}")
        return value

    @staticmethod
    def parse_number_range(min_text: str, max_text: str) -> NumberRange:
        """
        Parsea un rango "min:max" (inclusivo en ambos extremos).

        Raises:
            ValueError: si algún extremo no es numérico o min > max
        """
        try:
            minimum = NumberUtils.parse_number(min_text)
            maximum = NumberUtils.parse_number(max_text)
        except ValueError:
            raise ValueError(f"Rango numérico inválido: {min_text}:{max_text}")

        if minimum > maximum:
            raise ValueError(
                f"Rango inválido: min ({NumberUtils.format_number(minimum)}) no puede ser "
                f"mayor que max ({NumberUtils.format_number(maximum)})"
            )

        return NumberRange(min=minimum, max=maximum)

    @staticmethod
    def parse_number_tolerance(value_text: str, tolerance_text: str) -> NumberTolerance:
        """
        Parsea una tolerancia.

        Formatos: "±5" (absoluta) y "±10%" (porcentaje de |valor|).
        """
        value = NumberUtils.parse_number(value_text)

        is_percentage = tolerance_text.endswith("%")
        clean = tolerance_text[:-1] if is_percentage else tolerance_text
        if clean.startswith("±"):
            clean = clean[1:]

        try:
            tolerance = NumberUtils.parse_number(clean)
        except ValueError:
            raise ValueError(f"Tolerancia inválida: {tolerance_text}")
        if tolerance < 0:
            raise ValueError(f"Tolerancia inválida: {tolerance_text}")

        return NumberTolerance(value=value, tolerance=tolerance, is_percentage=is_percentage)

    @staticmethod
    def is_number_in_range(actual: float, number_range: NumberRange) -> Tuple[bool, float]:
        """
        Returns:
            (dentro_del_rango, distancia con signo al extremo más cercano)
            La distancia es negativa por debajo de min, positiva por encima de max
            y 0 dentro del rango.
        """
        if actual < number_range.min:
            return False, actual - number_range.min
        if actual > number_range.max:
            return False, actual - number_range.max
        return True, 0.0

    @staticmethod
    def is_number_within_tolerance(actual: float, spec: NumberTolerance) -> Tuple[bool, float, float]:
        """
        Returns:
            (dentro, diferencia real, diferencia permitida)
        """
        if spec.is_percentage:
            allowed = abs(spec.value) * spec.tolerance / 100
        else:
            allowed = spec.tolerance

        difference = abs(actual - spec.value)
        return difference <= allowed, difference, allowed

    @staticmethod
    def format_number(value: float) -> str:
        """Formatea sin decimales superfluos (85.0 -> "85")."""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def format_range(number_range: NumberRange) -> str:
        return f"[{NumberUtils.format_number(number_range.min)}, {NumberUtils.format_number(number_range.max)}]"

    @staticmethod
    def format_tolerance(spec: NumberTolerance) -> str:
        suffix = "%" if spec.is_percentage else ""
        return f"{NumberUtils.format_number(spec.value)} ±{NumberUtils.format_number(spec.tolerance)}{suffix}"
