"""
Vector Assembly — сборка квантованных записей для ABI-энкодера

Каждая операция:
1. Проверяет параметры (std_dev > 0, конечные значения)
2. Вычисляет результат гауссовым ядром / поиском экстремумов
3. Квантует все числовые листья в fixed-point int256
4. Проверяет запись JSON Schema контрактом

Знаковые конвенции:
- pdf_difference_record: pdf(curve1) - pdf(curve2)
- curve_points_record: экстремумы pdf(curve2) - pdf(curve1)
"""

from typing import Any, Dict

from src.core.contracts import validate_int256_scalar, validate_pdf_test_data
from src.core.domain import Curve, PdfTestData
from src.core.math.extrema import ExtremaConfig, find_extrema
from src.core.math.fixed_point import quantize_tree, to_fixed_point_integer
from src.core.math.gaussian import difference, pdf, pdf_derivative, pdf_second_derivative
from src.core.math.numerical_safeguards import validate_finite, validate_positive


def _scalar_record(value: float) -> Dict[str, int]:
    record = {"x": to_fixed_point_integer(value)}
    validate_int256_scalar(record)
    return record


def _validate_point(x: float, scale: float) -> None:
    validate_finite(x, "x")
    validate_finite(scale, "scale")


# =============================================================================
# SCALAR RECORDS
# =============================================================================


def pdf_record(mean: float, std_dev: float, x: float, scale: float = 1.0) -> Dict[str, int]:
    """Запись `int256 x` = q(pdf(mean, std_dev, x, scale))."""
    curve = Curve(mean=mean, std_dev=std_dev)
    _validate_point(x, scale)
    return _scalar_record(pdf(curve.mean, curve.std_dev, x, scale))


def derivative_record(mean: float, std_dev: float, x: float, scale: float = 1.0) -> Dict[str, int]:
    """Запись `int256 x` = q(p'(x))."""
    curve = Curve(mean=mean, std_dev=std_dev)
    _validate_point(x, scale)
    return _scalar_record(pdf_derivative(curve)(x, scale))


def second_derivative_record(
    mean: float, std_dev: float, x: float, scale: float = 1.0
) -> Dict[str, int]:
    """Запись `int256 x` = q(p''(x))."""
    curve = Curve(mean=mean, std_dev=std_dev)
    _validate_point(x, scale)
    return _scalar_record(pdf_second_derivative(curve)(x, scale))


def pdf_difference_record(
    mean1: float, std_dev1: float, mean2: float, std_dev2: float, x: float
) -> Dict[str, int]:
    """Запись `int256 x` = q(pdf(curve1, x) - pdf(curve2, x))."""
    curve1 = Curve(mean=mean1, std_dev=std_dev1)
    curve2 = Curve(mean=mean2, std_dev=std_dev2)
    validate_finite(x, "x")
    return _scalar_record(difference(curve1, curve2)(x))


# =============================================================================
# CURVE POINTS
# =============================================================================


def _validate_representable(curve: Curve, name: str) -> None:
    """std_dev, усечённый до 10^-18, должен остаться > 0 (иначе on-chain деление на ноль)."""
    if to_fixed_point_integer(curve.std_dev) == 0:
        raise ValueError(
            f"{name} after scaling ({curve.std_dev!r}) is below the fixed-point resolution 1e-18"
        )


def build_pdf_test_data(
    mean1: float,
    std_dev1: float,
    mean2: float,
    std_dev2: float,
    x: float,
    scale: float = 1.0,
    config: ExtremaConfig | None = None,
) -> PdfTestData:
    """
    Две кривые (mean и std_dev умножены на scale), экстремумы их разности и x.

    Raises:
        ValueError: Если scale <= 0, std_dev <= 0 (или < 1e-18 после scale)
                    или параметры NaN/Inf
    """
    validate_positive(scale, "scale")
    validate_finite(x, "x")

    curve1 = Curve(mean=mean1, std_dev=std_dev1).scaled(scale)
    curve2 = Curve(mean=mean2, std_dev=std_dev2).scaled(scale)
    _validate_representable(curve1, "std_dev1")
    _validate_representable(curve2, "std_dev2")

    return PdfTestData(
        c1=curve1,
        c2=curve2,
        diff=find_extrema(curve1, curve2, config),
        x=x,
    )


def curve_points_record(
    mean1: float,
    std_dev1: float,
    mean2: float,
    std_dev2: float,
    x: float,
    scale: float = 1.0,
    config: ExtremaConfig | None = None,
) -> Dict[str, Any]:
    """Квантованная запись PdfTestData в порядке полей on-chain структуры."""
    test_data = build_pdf_test_data(mean1, std_dev1, mean2, std_dev2, x, scale, config)
    record = quantize_tree(test_data.model_dump())
    validate_pdf_test_data(record)
    return record
