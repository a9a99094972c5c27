"""
Core math modules

Гауссово ядро, поиск экстремумов разности кривых и fixed-point квантование.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    is_valid_float,
    sign,
    validate_finite,
    validate_positive,
)

# Gaussian Kernel
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

# Adaptive Gradient Search
from src.core.math.gradient_search import (
    GradientSearchConfig,
    GradientSearchResult,
    GradientSearchState,
    find_root,
    search_turning_point,
)

# Extrema Locator
from src.core.math.extrema import (
    ExtremaConfig,
    coarse_extrema,
    find_extrema,
    refine_turning_point,
    sample_difference,
    scan_domain,
)

# Fixed-Point Quantizer
from src.core.math.fixed_point import (
    FIXED_POINT_DECIMALS,
    FIXED_POINT_ONE,
    INT256_MAX,
    INT256_MIN,
    FixedPointOverflow,
    QuantizationError,
    from_fixed_point_integer,
    quantize_tree,
    scientific_decomposition,
    to_fixed_point_integer,
)

__all__ = [
    # Numerical Safeguards
    "is_valid_float",
    "sign",
    "validate_finite",
    "validate_positive",
    # Gaussian Kernel
    "SQRT_TWO_PI",
    "difference",
    "difference_derivative",
    "difference_point",
    "pdf",
    "pdf_derivative",
    "pdf_peak",
    "pdf_second_derivative",
    # Adaptive Gradient Search
    "GradientSearchConfig",
    "GradientSearchResult",
    "GradientSearchState",
    "find_root",
    "search_turning_point",
    # Extrema Locator
    "ExtremaConfig",
    "coarse_extrema",
    "find_extrema",
    "refine_turning_point",
    "sample_difference",
    "scan_domain",
    # Fixed-Point Quantizer
    "FIXED_POINT_DECIMALS",
    "FIXED_POINT_ONE",
    "INT256_MAX",
    "INT256_MIN",
    "FixedPointOverflow",
    "QuantizationError",
    "from_fixed_point_integer",
    "quantize_tree",
    "scientific_decomposition",
    "to_fixed_point_integer",
]
