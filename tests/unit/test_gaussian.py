"""
Тесты для Gaussian Kernel

Проверяет:
1. pdf > 0 и ∫pdf ≈ 1
2. Производная обращается в ноль в mean
3. Вторая производная отрицательна в mean (вогнутость)
4. Согласие аналитических производных с конечными разностями
5. Разность кривых и её знаковые конвенции
"""

import math

import pytest

from src.core.domain import Curve, Point
from src.core.math.gaussian import (
    SQRT_TWO_PI,
    difference,
    difference_derivative,
    difference_point,
    pdf,
    pdf_derivative,
    pdf_peak,
    pdf_second_derivative,
)


CURVES = [
    Curve(mean=0.0, std_dev=1.0),
    Curve(mean=2.0, std_dev=1.0),
    Curve(mean=-3.5, std_dev=0.25),
    Curve(mean=5.0, std_dev=2.0),
    Curve(mean=100.0, std_dev=15.0),
]


# =============================================================================
# ТЕСТЫ: pdf
# =============================================================================


class TestPdf:
    """Тесты pdf: значения, положительность, нормировка."""

    def test_standard_normal_at_zero(self):
        """pdf(0, 1, 0) = 1/√(2π)."""
        assert pdf(0.0, 1.0, 0.0) == pytest.approx(0.3989422804014327, rel=1e-15)
        assert pdf(0.0, 1.0, 0.0) == pytest.approx(1 / SQRT_TWO_PI)

    def test_standard_normal_at_one(self):
        """pdf(0, 1, 1) = e^(-1/2)/√(2π)."""
        assert pdf(0.0, 1.0, 1.0) == pytest.approx(math.exp(-0.5) / math.sqrt(2 * math.pi))

    def test_symmetry_around_mean(self):
        """pdf симметрична относительно mean."""
        for curve in CURVES:
            for offset in (0.1, 0.5, 1.0, 3.0):
                left = pdf(curve.mean, curve.std_dev, curve.mean - offset)
                right = pdf(curve.mean, curve.std_dev, curve.mean + offset)
                assert left == pytest.approx(right, rel=1e-12)

    @pytest.mark.parametrize("curve", CURVES)
    def test_positive_for_finite_x(self, curve):
        """pdf > 0 для любого конечного x в разумном диапазоне."""
        for k in range(-30, 31):
            x = curve.mean + k * curve.std_dev
            assert pdf(curve.mean, curve.std_dev, x) > 0

    @pytest.mark.parametrize("curve", CURVES)
    def test_integrates_to_one(self, curve):
        """Сумма Римана на ±10σ ≈ 1 (толерантность 1e-6)."""
        n = 20_000
        x_min = curve.mean - 10 * curve.std_dev
        dx = 20 * curve.std_dev / n
        total = sum(pdf(curve.mean, curve.std_dev, x_min + (i + 0.5) * dx) for i in range(n)) * dx
        assert total == pytest.approx(1.0, abs=1e-6)

    def test_scale_multiplies_density(self):
        """scale линейно масштабирует плотность."""
        assert pdf(1.0, 2.0, 0.3, scale=3.0) == pytest.approx(3.0 * pdf(1.0, 2.0, 0.3))
        assert pdf(1.0, 2.0, 0.3, scale=0.0) == 0.0

    def test_peak_equals_pdf_at_mean(self):
        """pdf_peak совпадает со значением pdf в mean."""
        for curve in CURVES:
            assert pdf_peak(curve) == pytest.approx(pdf(curve.mean, curve.std_dev, curve.mean))

    def test_zero_std_dev_is_undefined(self):
        """std_dev == 0 — нарушение предусловия (деление на ноль)."""
        with pytest.raises(ZeroDivisionError):
            pdf(0.0, 0.0, 0.0)


# =============================================================================
# ТЕСТЫ: производные
# =============================================================================


class TestPdfDerivative:
    """Тесты первой производной."""

    @pytest.mark.parametrize("curve", CURVES)
    def test_vanishes_at_mean(self, curve):
        """p'(mean) = 0."""
        assert pdf_derivative(curve)(curve.mean) == pytest.approx(0.0, abs=1e-15)

    def test_sign_left_and_right_of_mean(self):
        """Слева от mean плотность растёт, справа убывает."""
        curve = Curve(mean=1.0, std_dev=0.5)
        derivative = pdf_derivative(curve)
        assert derivative(0.5) > 0
        assert derivative(1.5) < 0

    @pytest.mark.parametrize("curve", CURVES)
    def test_matches_central_difference(self, curve):
        """Аналитическая производная согласуется с конечной разностью."""
        derivative = pdf_derivative(curve)
        h = 1e-5 * curve.std_dev
        for k in (-2.0, -0.7, 0.3, 1.5):
            x = curve.mean + k * curve.std_dev
            numeric = (pdf(curve.mean, curve.std_dev, x + h) - pdf(curve.mean, curve.std_dev, x - h)) / (2 * h)
            assert derivative(x) == pytest.approx(numeric, rel=1e-6)

    def test_scale_applied_twice(self):
        """scale входит и множителем, и в pdf: p'(x, s) = s² * p'(x, 1)."""
        curve = Curve(mean=0.0, std_dev=1.0)
        derivative = pdf_derivative(curve)
        assert derivative(0.8, 2.0) == pytest.approx(4.0 * derivative(0.8))


class TestPdfSecondDerivative:
    """Тесты второй производной."""

    @pytest.mark.parametrize("curve", CURVES)
    def test_concave_at_mean(self, curve):
        """p''(mean) < 0 и равна -pdf_peak/σ²."""
        value = pdf_second_derivative(curve)(curve.mean)
        assert value < 0
        assert value == pytest.approx(-pdf_peak(curve) / curve.std_dev**2)

    @pytest.mark.parametrize("curve", CURVES)
    def test_inflection_points(self, curve):
        """Точки перегиба в mean ± σ."""
        second = pdf_second_derivative(curve)
        peak = pdf_peak(curve)
        assert second(curve.mean + curve.std_dev) == pytest.approx(0.0, abs=1e-12 * peak)
        assert second(curve.mean - curve.std_dev) == pytest.approx(0.0, abs=1e-12 * peak)

    @pytest.mark.parametrize("curve", CURVES)
    def test_matches_derivative_difference(self, curve):
        """p'' согласуется с конечной разностью p'."""
        derivative = pdf_derivative(curve)
        second = pdf_second_derivative(curve)
        h = 1e-5 * curve.std_dev
        for k in (-2.5, -0.4, 0.6, 2.0):
            x = curve.mean + k * curve.std_dev
            numeric = (derivative(x + h) - derivative(x - h)) / (2 * h)
            assert second(x) == pytest.approx(numeric, rel=1e-5)


# =============================================================================
# ТЕСТЫ: разность кривых
# =============================================================================


class TestDifference:
    """Тесты разности двух кривых."""

    def test_first_minus_second(self):
        """difference(a, b)(x) = pdf(a, x) - pdf(b, x)."""
        a = Curve(mean=0.0, std_dev=1.0)
        b = Curve(mean=2.0, std_dev=1.0)
        expected = pdf(0.0, 1.0, 0.5) - pdf(2.0, 1.0, 0.5)
        assert difference(a, b)(0.5) == pytest.approx(expected)
        assert difference(b, a)(0.5) == pytest.approx(-expected)

    def test_identical_curves_zero(self):
        """Разность одинаковых кривых тождественно 0."""
        curve = Curve(mean=1.0, std_dev=3.0)
        for x in (-5.0, 0.0, 1.0, 7.5):
            assert difference(curve, curve)(x) == 0.0

    def test_difference_derivative(self):
        """Производная разности = разность производных."""
        a = Curve(mean=0.0, std_dev=1.0)
        b = Curve(mean=1.0, std_dev=2.0)
        x = 0.4
        expected = pdf_derivative(a)(x) - pdf_derivative(b)(x)
        assert difference_derivative(a, b)(x) == pytest.approx(expected)

    def test_difference_point_uses_second_minus_first(self):
        """difference_point(c1, c2) сэмплирует pdf(c2) - pdf(c1)."""
        c1 = Curve(mean=0.0, std_dev=1.0)
        c2 = Curve(mean=2.0, std_dev=1.0)
        point = difference_point(c1, c2)(0.0)
        assert isinstance(point, Point)
        assert point.x == 0.0
        assert point.y == pytest.approx(pdf(2.0, 1.0, 0.0) - pdf(0.0, 1.0, 0.0))
        assert point.y < 0
