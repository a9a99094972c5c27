"""
Gaussian Kernel — плотность нормального распределения и её производные

Замкнутые формулы, эквивалентные on-chain библиотеке PdfLib:
- pdf(x)   = scale * exp(-(x-μ)² / (2σ²)) / (σ√(2π))
- p'(x)    = -scale * (x-μ)/σ² * p(x)
- p''(x)   = [scale²(x-μ)²/σ⁴ - scale²/σ²] * p(x)
- разность двух кривых и её производная
- pdf_peak: высота пика 1/(σ√(2π)), публичный диагностический хелпер
  (для проверки масштаба векторов; сами операции его не вызывают)

Все функции чистые и детерминированные. Предусловие: σ > 0
(гарантируется моделью Curve и validate_positive на границе операций).
"""

import math
from typing import Callable, Final

from src.core.domain.curves import Curve, Point

# √(2π)
SQRT_TWO_PI: Final[float] = math.sqrt(2 * math.pi)

CurveFunction = Callable[..., float]


# =============================================================================
# PDF
# =============================================================================


def pdf(mean: float, std_dev: float, x: float, scale: float = 1.0) -> float:
    """
    Плотность нормального распределения N(mean, std_dev²) в точке x.

    Эквивалент pdf() в PdfLib.sol.

    Args:
        mean: Математическое ожидание μ
        std_dev: Стандартное отклонение σ (> 0, не проверяется здесь)
        x: Точка вычисления
        scale: Множитель плотности (default: 1)

    Returns:
        scale * exp(-(x-μ)² / (2σ²)) / (σ√(2π))

    Examples:
        >>> round(pdf(0.0, 1.0, 0.0), 12)
        0.398942280401
    """
    numerator = math.exp(-((x - mean) ** 2) / (2 * std_dev**2))
    denominator = std_dev * SQRT_TWO_PI
    return (scale * numerator) / denominator


def pdf_peak(curve: Curve) -> float:
    """Максимальная высота кривой (значение pdf в точке mean): 1 / (σ√(2π))."""
    return 1 / (curve.std_dev * SQRT_TWO_PI)


# =============================================================================
# ПРОИЗВОДНЫЕ
# =============================================================================


def pdf_derivative(curve: Curve) -> CurveFunction:
    """
    Первая производная плотности.

    Эквивалент pdfDerivativeAtX в PdfLib.sol:
        p'(x) = -scale * (x-μ)/σ² * p(x)

    Returns:
        Функция (x, scale=1) -> p'(x)
    """

    def derivative(x: float, scale: float = 1.0) -> float:
        return (
            -scale
            * ((x - curve.mean) / curve.std_dev**2)
            * pdf(curve.mean, curve.std_dev, x, scale)
        )

    return derivative


def pdf_second_derivative(curve: Curve) -> CurveFunction:
    """
    Вторая производная плотности.

    Эквивалент pdfSecondDerivativeAtX в PdfLib.sol:
        p''(x) = [scale²(x-μ)²/σ⁴ - scale²/σ²] * p(x)

    Returns:
        Функция (x, scale=1) -> p''(x)
    """

    def second_derivative(x: float, scale: float = 1.0) -> float:
        x_minus_mean_squared = (x - curve.mean) ** 2
        term1 = (scale * scale * x_minus_mean_squared) / curve.std_dev**4
        term2 = (scale * scale) / curve.std_dev**2
        return (term1 - term2) * pdf(curve.mean, curve.std_dev, x, scale)

    return second_derivative


# =============================================================================
# РАЗНОСТЬ ДВУХ КРИВЫХ
# =============================================================================


def difference(first: Curve, second: Curve) -> Callable[[float], float]:
    """
    Разность двух плотностей: x -> pdf(first, x) - pdf(second, x).

    Эквивалент pdfDifference в PdfLib.sol.
    """

    def diff(x: float) -> float:
        return pdf(first.mean, first.std_dev, x) - pdf(second.mean, second.std_dev, x)

    return diff


def difference_derivative(first: Curve, second: Curve) -> Callable[[float], float]:
    """Производная разности: x -> p'(first, x) - p'(second, x)."""
    first_derivative = pdf_derivative(first)
    second_derivative = pdf_derivative(second)

    def diff_derivative(x: float) -> float:
        return first_derivative(x) - second_derivative(x)

    return diff_derivative


def difference_point(curve1: Curve, curve2: Curve) -> Callable[[float], Point]:
    """
    Точка кривой разности pdf(curve2) - pdf(curve1).

    Порядок аргументов совпадает с find_extrema: экстремумы считаются
    относительно второй кривой.
    """
    diff = difference(curve2, curve1)

    def point(x: float) -> Point:
        return Point(x=x, y=diff(x))

    return point
