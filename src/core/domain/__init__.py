"""
Domain models and value objects.

Contains the Gaussian curve models and the reference-vector records.
"""

from src.core.domain.curves import Curve, DifferenceExtrema, Point
from src.core.domain.reference_vectors import PdfTestData

__all__ = [
    "Curve",
    "Point",
    "DifferenceExtrema",
    "PdfTestData",
]
