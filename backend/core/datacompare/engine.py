# datacompare/engine.py
"""
Punto de entrada del motor de comparación.
"""

import logging
import time
from typing import Any, Dict, Optional, Union

from .comparer import RecursiveComparer
from .directives import ALL_DIRECTIVES
from .errors import CompareErrors
from .models import (
    CompareContext, CompareOptions, CompareRequest, CompareResult, CompareStats, UNDEFINED
)
from .parser import CompareParser
from .registry import CompareRegistry

logger = logging.getLogger(__name__)


class CompareEngine:
    """Motor principal de comparación de datos esperados contra actuales."""

    def __init__(self, registry: Optional[CompareRegistry] = None):
        self._registry = registry or CompareRegistry()
        self._parser = CompareParser()

    @property
    def registry(self) -> CompareRegistry:
        """Registro de directivas (para registrar directivas propias)."""
        return self._registry

    @property
    def parser(self) -> CompareParser:
        return self._parser

    async def compare(self, request: CompareRequest) -> CompareResult:
        """
        Compara los datos esperados contra los actuales.

        Nunca lanza por problemas en los datos: todo fallo queda como
        CompareError dentro del resultado.

        Args:
            request: Valores, contexto y opciones de la comparación

        Returns:
            CompareResult completo con errores, detalles y estadísticas
        """
        start_time = time.time()
        options = CompareOptions.from_dict(request.options)
        context = CompareContext.from_dict(request.context)

        if request.actual is UNDEFINED:
            logger.debug("Comparación abortada: el valor actual es undefined")
            return self._build_result([CompareErrors.root_undefined()], [], start_time)

        comparer = RecursiveComparer(self._parser, self._registry)
        outcome = comparer.compare(request.expected, request.actual, [], context, options)

        result = self._build_result(
            outcome["errors"],
            outcome["details"],
            start_time,
            outcome["max_depth_reached"]
        )

        logger.debug(
            f"Comparación finalizada: {result.stats.passed_checks} correctas, "
            f"{result.stats.failed_checks} fallidas en {result.stats.duration:.2f} ms"
        )

        return result

    def _build_result(self, errors, details, start_time: float, max_depth_reached: Optional[int] = None) -> CompareResult:
        duration = (time.time() - start_time) * 1000
        stats = CompareStats.from_logs(errors, details, duration, max_depth_reached)

        return CompareResult(
            success=not errors,
            errors=list(errors),
            details=list(details),
            stats=stats
        )


def create_default_engine() -> CompareEngine:
    """Crea un motor con todas las directivas incluidas ya registradas."""
    registry = CompareRegistry()
    registry.register_directives(directive_class() for directive_class in ALL_DIRECTIVES.values())
    return CompareEngine(registry)


async def compare_data(
    expected: Any,
    actual: Any = UNDEFINED,
    context: Optional[Union[CompareContext, Dict[str, Any]]] = None,
    options: Optional[Union[CompareOptions, Dict[str, Any]]] = None
) -> CompareResult:
    """
    Atajo: compara con un motor por defecto.

    Ejemplo:
        result = await compare_data(
            {"email": "{{compare:endsWith:@example.com}}"},
            {"email": "john@example.com"}
        )
    """
    engine = create_default_engine()
    request = CompareRequest(
        expected=expected,
        actual=actual,
        context=CompareContext.from_dict(context),
        options=CompareOptions.from_dict(options)
    )
    return await engine.compare(request)
