# backend/app/models/compare.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional, Union


class IgnorePathModel(BaseModel):
    """Ruta a excluir de la comparación ('*' como comodín)"""

    path: List[Union[str, int]] = Field(
        ...,
        description="Segmentos de la ruta. Ej: ['items', '*', 'richtung']"
    )
    doc: List[str] = Field(
        default_factory=list,
        description="Motivo documentado de la exclusión"
    )


class CompareOptionsModel(BaseModel):
    """Opciones de comparación (todas opcionales)"""

    model_config = ConfigDict(populate_by_name=True)

    format: Optional[str] = Field(None, description="json, text o xml")
    strict_mode: Optional[bool] = Field(None, alias="strictMode")
    ignore_extra_properties: Optional[bool] = Field(None, alias="ignoreExtraProperties")
    max_depth: Optional[int] = Field(None, alias="maxDepth")
    max_errors: Optional[int] = Field(None, alias="maxErrors")
    ignore_paths: Optional[List[IgnorePathModel]] = Field(None, alias="ignorePaths")

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        valid_formats = ['json', 'text', 'xml']
        if v is not None and v not in valid_formats:
            raise ValueError(f"format debe ser uno de: {valid_formats}")
        return v

    @field_validator('max_depth', 'max_errors')
    @classmethod
    def validate_limits(cls, v):
        if v is not None and v < 1:
            raise ValueError("los límites deben ser mayores que 0")
        return v


class CompareRequestModel(BaseModel):
    """Solicitud de comparación de datos esperados contra actuales"""

    expected: Any = Field(
        ...,
        description="Árbol esperado; puede contener directivas {{compare:...}}"
    )
    # Si el campo no se envía, el valor actual se considera undefined
    actual: Any = Field(
        None,
        description="Árbol actual a validar"
    )
    context: Dict[str, Any] = Field(
        default_factory=dict,
        description="Contexto (startTimeTest, startTimeScript, datos adicionales)"
    )
    options: CompareOptionsModel = Field(default_factory=CompareOptionsModel)

    def has_actual(self) -> bool:
        return "actual" in self.model_fields_set


class CompareErrorModel(BaseModel):
    path: str
    type: str
    expected: Any = None
    actual: Any = None
    message: str


class CompareDetailModel(BaseModel):
    path: str
    passed: bool
    expected: Any = None
    actual: Any = None
    message: Optional[str] = None


class CompareStatsModel(BaseModel):
    totalChecks: int
    passedChecks: int
    failedChecks: int
    duration: float
    maxDepthReached: Optional[int] = None


class CompareResponse(BaseModel):
    """Resultado de una comparación"""

    success: bool
    errors: List[CompareErrorModel] = []
    details: List[CompareDetailModel] = []
    stats: CompareStatsModel


class DirectiveInfo(BaseModel):
    name: str
    description: str
    class_name: str = Field(..., alias="class")

    model_config = ConfigDict(populate_by_name=True)
