# backend/app/api/v1/endpoints/compare.py
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse
from typing import List
import logging

from ....models.compare import CompareRequestModel, CompareResponse, DirectiveInfo
from ....services.compare_service import CompareService
from .....core.datacompare.reporting import FORMATTERS

router = APIRouter()
logger = logging.getLogger(__name__)

_MEDIA_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
    "summary": "text/plain"
}


@router.post("/", response_model=CompareResponse)
async def compare(request: CompareRequestModel):
    """
    Compara `expected` contra `actual`.
    Los fallos de datos se devuelven en `errors`, nunca como error HTTP.
    """
    logger.info("Received compare request")

    try:
        return await CompareService.compare_to_dict(request)
    except Exception as e:
        logger.error(f"Error in comparison: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error en la comparación: {str(e)}")


@router.post("/report")
async def compare_report(
        request: CompareRequestModel,
        report_format: str = Query("json", description="json, csv o summary")
):
    """Compara y devuelve el resultado formateado como reporte"""
    if report_format not in FORMATTERS:
        raise HTTPException(
            status_code=400,
            detail=f"Formato de reporte desconocido: {report_format}. "
                   f"Formatos disponibles: {', '.join(FORMATTERS)}"
        )

    logger.info(f"Received compare report request, format: {report_format}")

    try:
        content = await CompareService.compare_report(request, report_format)
    except Exception as e:
        logger.error(f"Error generating report: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error generando el reporte: {str(e)}")

    return PlainTextResponse(content, media_type=_MEDIA_TYPES[report_format])


@router.get("/directives", response_model=List[DirectiveInfo])
async def list_directives():
    """Lista las directivas registradas"""
    return CompareService.list_directives()
