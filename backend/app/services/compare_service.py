from functools import lru_cache
from typing import Any, Dict, List
import logging

from ...core.datacompare import (
    CompareContext, CompareEngine, CompareOptions, CompareRequest, CompareResult,
    IgnorePathConfig, UNDEFINED, create_default_engine
)
from ...core.datacompare.reporting import get_formatter
from ..core.config import Settings, get_settings
from ..models.compare import CompareOptionsModel, CompareRequestModel

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine() -> CompareEngine:
    """Motor compartido; el registro se completa antes del primer uso."""
    return create_default_engine()


class CompareService:

    @staticmethod
    def build_options(options: CompareOptionsModel, settings: Settings) -> CompareOptions:
        """
        Combina las opciones de la solicitud con los valores por defecto de
        la configuración, campo a campo.
        """
        def pick(value, default):
            return default if value is None else value

        ignore_paths = tuple(
            IgnorePathConfig(path=tuple(item.path), doc=tuple(item.doc))
            for item in (options.ignore_paths or [])
        )

        return CompareOptions(
            format=pick(options.format, "json"),
            strict_mode=pick(options.strict_mode, settings.DEFAULT_STRICT_MODE),
            ignore_extra_properties=pick(
                options.ignore_extra_properties, settings.DEFAULT_IGNORE_EXTRA_PROPERTIES
            ),
            max_depth=pick(options.max_depth, settings.DEFAULT_MAX_DEPTH),
            max_errors=pick(options.max_errors, settings.DEFAULT_MAX_ERRORS),
            ignore_paths=ignore_paths
        )

    @staticmethod
    async def compare(payload: CompareRequestModel) -> CompareResult:
        settings = get_settings()
        engine = get_engine()

        request = CompareRequest(
            expected=payload.expected,
            actual=payload.actual if payload.has_actual() else UNDEFINED,
            context=CompareContext.from_dict(payload.context),
            options=CompareService.build_options(payload.options, settings)
        )

        result = await engine.compare(request)

        logger.info(
            f"Comparison finished: success={result.success}, "
            f"checks={result.stats.total_checks}, errors={result.stats.failed_checks}"
        )
        return result

    @staticmethod
    async def compare_to_dict(payload: CompareRequestModel) -> Dict[str, Any]:
        result = await CompareService.compare(payload)
        return result.to_dict()

    @staticmethod
    async def compare_report(payload: CompareRequestModel, report_format: str) -> str:
        """
        Raises:
            ValueError: si el formato de reporte no existe
        """
        formatter = get_formatter(report_format)
        result = await CompareService.compare(payload)
        return formatter.format(result)

    @staticmethod
    def list_directives() -> List[Dict[str, str]]:
        return get_engine().registry.list_directives()
