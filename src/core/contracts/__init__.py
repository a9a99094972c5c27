"""
Contract Validation Module

Модуль для валидации записей, передаваемых ABI-энкодеру.
"""

from .validators import (
    ContractValidator,
    Int256ScalarValidator,
    PdfTestDataValidator,
    SchemaLoader,
    validate_int256_scalar,
    validate_pdf_test_data,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Int256ScalarValidator",
    "PdfTestDataValidator",
    # Functions
    "validate_int256_scalar",
    "validate_pdf_test_data",
]
