"""Vectors — сборка, ABI-кодирование и CLI эталонных векторов PdfLib."""

from src.vectors.assembly import (
    build_pdf_test_data,
    curve_points_record,
    derivative_record,
    pdf_difference_record,
    pdf_record,
    second_derivative_record,
)
from src.vectors.encoding import abi_type, encode_record, encode_record_hex

__all__ = [
    "build_pdf_test_data",
    "curve_points_record",
    "derivative_record",
    "pdf_difference_record",
    "pdf_record",
    "second_derivative_record",
    "abi_type",
    "encode_record",
    "encode_record_hex",
]
