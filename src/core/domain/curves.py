"""
Curves — модели гауссовых кривых и точек

Immutable Pydantic модели:
- Curve: параметры нормального распределения (mean, std_dev > 0)
- Point: точка (x, y) на кривой разности
- DifferenceExtrema: глобальные минимум и максимум разности pdf(c2) - pdf(c1)

Порядок полей совпадает с порядком полей on-chain структур
(struct Curve, struct Point, struct DifferenceExtrema).
"""

import math

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# CURVE
# =============================================================================


class Curve(BaseModel):
    """
    Нормальное распределение N(mean, std_dev²).

    std_dev <= 0 отвергается при создании: pdf при таком σ не определена.
    """

    mean: float = Field(..., description="Математическое ожидание μ")
    std_dev: float = Field(..., gt=0, description="Стандартное отклонение σ")

    model_config = {"frozen": True}

    @field_validator("mean", "std_dev")
    @classmethod
    def validate_finite_params(cls, v: float) -> float:
        """NaN/Inf не допускаются ни в одном параметре"""
        if not math.isfinite(v):
            raise ValueError(f"curve parameters must be finite, got {v}")
        return v

    def scaled(self, scale: float) -> "Curve":
        """Кривая с mean и std_dev, умноженными на scale."""
        return Curve(mean=self.mean * scale, std_dev=self.std_dev * scale)


# =============================================================================
# POINT
# =============================================================================


class Point(BaseModel):
    """Точка кривой разности."""

    x: float
    y: float

    model_config = {"frozen": True}


class DifferenceExtrema(BaseModel):
    """
    Глобальные экстремумы разности pdf(curve2, x) - pdf(curve1, x).

    Знак разности фиксирован: вторая кривая минус первая.
    """

    min: Point = Field(..., description="Глобальный минимум разности")
    max: Point = Field(..., description="Глобальный максимум разности")

    model_config = {"frozen": True}
