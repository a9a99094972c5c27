"""
Reference Vectors — записи тестовых данных для on-chain PdfLib

PdfTestData соответствует on-chain структуре:

    struct MarketData {Curve c1; Curve c2; DifferenceExtrema diff; int256 x;}

Порядок полей модели == порядок полей в ABI-кортеже.
"""

from pydantic import BaseModel, Field

from src.core.domain.curves import Curve, DifferenceExtrema


class PdfTestData(BaseModel):
    """Две кривые, экстремумы их разности и точка вычисления x."""

    c1: Curve = Field(..., description="Первая кривая")
    c2: Curve = Field(..., description="Вторая кривая")
    diff: DifferenceExtrema = Field(..., description="Экстремумы pdf(c2) - pdf(c1)")
    x: float = Field(..., description="Точка вычисления")

    model_config = {"frozen": True}
