"""
Тесты для Vector Assembly и ABI Encoding

Проверяет:
1. Скалярные записи (pdf, производные, разность pdf) и их знаковые конвенции
2. Запись PdfTestData: масштабирование кривых, порядок полей, знаки экстремумов
3. Отклонение невалидных параметров до вычислений
4. ABI-кодирование записей
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Curve
from src.core.math.fixed_point import FIXED_POINT_ONE, to_fixed_point_integer
from src.core.math.gaussian import pdf, pdf_derivative, pdf_second_derivative
from src.vectors.assembly import (
    build_pdf_test_data,
    curve_points_record,
    derivative_record,
    pdf_difference_record,
    pdf_record,
    second_derivative_record,
)
from src.vectors.encoding import abi_type, abi_value, encode_record, encode_record_hex


# =============================================================================
# ТЕСТЫ: скалярные записи
# =============================================================================


class TestScalarRecords:
    """Тесты записей `int256 x`."""

    def test_pdf_record(self):
        record = pdf_record(0.0, 1.0, 0.0)
        assert record == {"x": to_fixed_point_integer(pdf(0.0, 1.0, 0.0))}
        assert abs(record["x"] - 398942280401432700) < 1000

    def test_pdf_record_with_scale(self):
        assert pdf_record(0.0, 1.0, 0.5, 2.0) == {"x": to_fixed_point_integer(pdf(0.0, 1.0, 0.5, 2.0))}

    def test_derivative_record(self):
        curve = Curve(mean=1.0, std_dev=2.0)
        assert derivative_record(1.0, 2.0, 0.3) == {"x": to_fixed_point_integer(pdf_derivative(curve)(0.3))}
        assert derivative_record(1.0, 2.0, 0.3)["x"] > 0

    def test_derivative_at_mean_is_zero(self):
        assert derivative_record(1.0, 2.0, 1.0) == {"x": 0}

    def test_second_derivative_record(self):
        curve = Curve(mean=0.0, std_dev=1.0)
        record = second_derivative_record(0.0, 1.0, 0.0)
        assert record == {"x": to_fixed_point_integer(pdf_second_derivative(curve)(0.0))}
        assert record["x"] < 0

    def test_pdf_difference_is_first_minus_second(self):
        """calculatePdfDifference: pdf(curve1) - pdf(curve2)."""
        record = pdf_difference_record(0.0, 1.0, 2.0, 1.0, 0.0)
        expected = pdf(0.0, 1.0, 0.0) - pdf(2.0, 1.0, 0.0)
        assert record == {"x": to_fixed_point_integer(expected)}
        assert record["x"] > 0

    @pytest.mark.parametrize("std_dev", [0.0, -1.0])
    def test_invalid_std_dev_rejected(self, std_dev):
        with pytest.raises(ValidationError):
            pdf_record(0.0, std_dev, 0.0)
        with pytest.raises(ValidationError):
            pdf_difference_record(0.0, 1.0, 0.0, std_dev, 0.0)

    def test_non_finite_x_rejected(self):
        with pytest.raises(ValueError, match="x must be a valid float"):
            derivative_record(0.0, 1.0, float("inf"))


# =============================================================================
# ТЕСТЫ: PdfTestData
# =============================================================================


class TestCurvePoints:
    """Тесты записи calculateCurvePoints."""

    def test_record_structure(self):
        record = curve_points_record(0.0, 1.0, 2.0, 1.0, 0.5)

        assert list(record) == ["c1", "c2", "diff", "x"]
        assert record["c1"] == {"mean": 0, "std_dev": FIXED_POINT_ONE}
        assert record["c2"] == {"mean": 2 * FIXED_POINT_ONE, "std_dev": FIXED_POINT_ONE}
        assert record["x"] == FIXED_POINT_ONE // 2

    def test_extrema_signs(self):
        record = curve_points_record(0.0, 1.0, 2.0, 1.0, 0.5)
        diff = record["diff"]

        assert diff["min"]["y"] < 0 < diff["max"]["y"]
        assert diff["min"]["x"] < diff["max"]["x"]

    def test_scale_applies_to_curves_not_x(self):
        """scale умножает mean и std_dev обеих кривых; x не масштабируется."""
        data = build_pdf_test_data(1.0, 1.0, 2.0, 0.5, 0.25, scale=2.0)

        assert data.c1 == Curve(mean=2.0, std_dev=2.0)
        assert data.c2 == Curve(mean=4.0, std_dev=1.0)
        assert data.x == 0.25

    def test_quantized_record_matches_model(self):
        data = build_pdf_test_data(0.0, 1.0, 2.0, 1.0, 0.5)
        record = curve_points_record(0.0, 1.0, 2.0, 1.0, 0.5)

        assert record["diff"]["min"]["x"] == to_fixed_point_integer(data.diff.min.x)
        assert record["diff"]["max"]["y"] == to_fixed_point_integer(data.diff.max.y)

    @pytest.mark.parametrize("scale", [0.0, -1.0, float("nan")])
    def test_invalid_scale_rejected(self, scale):
        with pytest.raises(ValueError, match="scale"):
            curve_points_record(0.0, 1.0, 2.0, 1.0, 0.5, scale)

    def test_invalid_std_dev_rejected(self):
        with pytest.raises(ValidationError):
            curve_points_record(0.0, 1.0, 2.0, 0.0, 0.5)

    @pytest.mark.parametrize(
        "std_dev1, std_dev2, scale, name",
        [
            (1e-19, 1.0, 1.0, "std_dev1"),
            (1.0, 5e-19, 1.0, "std_dev2"),
            (1.0, 1.0, 1e-20, "std_dev1"),
        ],
    )
    def test_std_dev_below_resolution_rejected(self, std_dev1, std_dev2, scale, name):
        """std_dev, который квантуется в 0, отвергается до поиска экстремумов."""
        with pytest.raises(ValueError, match=f"{name} .*fixed-point resolution"):
            curve_points_record(0.0, std_dev1, 1.0, std_dev2, 0.0, scale)


# =============================================================================
# ТЕСТЫ: ABI encoding
# =============================================================================


class TestEncoding:
    """Тесты ABI-кодирования записей."""

    def test_abi_type_of_record(self):
        record = curve_points_record(0.0, 1.0, 2.0, 1.0, 0.5)
        assert abi_type(record) == (
            "((int256,int256),(int256,int256),((int256,int256),(int256,int256)),int256)"
        )

    def test_abi_value_is_positional(self):
        assert abi_value({"a": {"b": 1, "c": 2}, "d": 3}) == ((1, 2), 3)

    def test_non_int_leaf_rejected(self):
        with pytest.raises(TypeError, match="Record leaves must be int"):
            abi_type({"x": 0.5})

    def test_scalar_encoding(self):
        assert encode_record({"x": 1}) == (1).to_bytes(32, "big")
        assert encode_record({"x": -1}) == b"\xff" * 32

    def test_scalar_hex(self):
        encoded = encode_record_hex({"x": FIXED_POINT_ONE})
        assert encoded == "0x" + FIXED_POINT_ONE.to_bytes(32, "big").hex()

    def test_struct_encoding_is_static_words(self):
        """Статическая структура из 9 int256 кодируется 9 словами по 32 байта."""
        record = curve_points_record(0.0, 1.0, 2.0, 1.0, 0.5)
        encoded = encode_record(record)

        assert len(encoded) == 9 * 32
        words = [int.from_bytes(encoded[i : i + 32], "big", signed=True) for i in range(0, len(encoded), 32)]
        assert words == [
            record["c1"]["mean"],
            record["c1"]["std_dev"],
            record["c2"]["mean"],
            record["c2"]["std_dev"],
            record["diff"]["min"]["x"],
            record["diff"]["min"]["y"],
            record["diff"]["max"]["x"],
            record["diff"]["max"]["y"],
            record["x"],
        ]
