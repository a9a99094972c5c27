"""
Extrema Locator — глобальные минимум и максимум разности двух гауссиан

Разность D(x) = pdf(curve2, x) - pdf(curve1, x) в общем случае не имеет
замкнутой формы для точек поворота. Алгоритм:

1. Область сканирования: ±sigma_span σ от каждого mean (по умолчанию 4σ,
   >99.99% массы каждой кривой). Точки поворота вне области игнорируются:
   это явное приближение, а не точный глобальный поиск.
2. Грубое сканирование D(x) в samples равноотстоящих точках.
3. Минимальный / максимальный сэмпл (при равенстве побеждает первый) —
   начальные приближения.
4. Уточнение каждого приближения Adaptive Gradient Search по D'(x).

Вырожденный случай (совпадающие кривые, D ≡ 0) не является ошибкой:
поиск возвращает точку внутри плоской области.
"""

import logging
from dataclasses import dataclass, field
from typing import Final

from src.core.domain.curves import Curve, DifferenceExtrema, Point
from src.core.math.gaussian import difference, difference_derivative, difference_point
from src.core.math.gradient_search import (
    GradientSearchConfig,
    GradientSearchResult,
    TurningPointKind,
    search_turning_point,
)

logger = logging.getLogger(__name__)

# Ширина области сканирования в стандартных отклонениях
SIGMA_SPAN_DEFAULT: Final[float] = 4.0

# Количество точек грубого сканирования (samples - 1 равных интервалов)
SCAN_SAMPLES_DEFAULT: Final[int] = 1000


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ExtremaConfig:
    """Конфигурация поиска экстремумов разности."""

    sigma_span: float = SIGMA_SPAN_DEFAULT
    samples: int = SCAN_SAMPLES_DEFAULT
    search: GradientSearchConfig = field(default_factory=GradientSearchConfig)

    def __post_init__(self) -> None:
        if self.sigma_span <= 0:
            raise ValueError(f"sigma_span must be positive, got {self.sigma_span}")
        if self.samples < 2:
            raise ValueError(f"samples must be >= 2, got {self.samples}")


# =============================================================================
# SCAN
# =============================================================================


def scan_domain(curve1: Curve, curve2: Curve, sigma_span: float = SIGMA_SPAN_DEFAULT) -> tuple[float, float]:
    """
    Область сканирования, покрывающая обе кривые.

    Returns:
        (x_min, x_max):
            x_min = min(μ1 - kσ1, μ2 - kσ2)
            x_max = max(μ1 + kσ1, μ2 + kσ2)
    """
    x_min = min(curve1.mean - sigma_span * curve1.std_dev, curve2.mean - sigma_span * curve2.std_dev)
    x_max = max(curve1.mean + sigma_span * curve1.std_dev, curve2.mean + sigma_span * curve2.std_dev)
    return x_min, x_max


def sample_difference(
    curve1: Curve,
    curve2: Curve,
    config: ExtremaConfig | None = None,
) -> list[Point]:
    """
    Сэмплы pdf(curve2) - pdf(curve1) на равномерной сетке.

    Первый сэмпл в x_min, последний в x_max.
    """
    config = config or ExtremaConfig()
    x_min, x_max = scan_domain(curve1, curve2, config.sigma_span)
    step = (x_max - x_min) / (config.samples - 1)
    point = difference_point(curve1, curve2)
    return [point(x_min + step * i) for i in range(config.samples)]


def coarse_extrema(samples: list[Point]) -> tuple[Point, Point]:
    """
    Грубые минимум и максимум по сэмплам (линейный проход).

    При равенстве y побеждает сэмпл с меньшим индексом.

    Raises:
        ValueError: Если samples пуст
    """
    if not samples:
        raise ValueError("samples cannot be empty")

    min_point = samples[0]
    max_point = samples[0]
    for point in samples[1:]:
        if point.y < min_point.y:
            min_point = point
        if point.y > max_point.y:
            max_point = point
    return min_point, max_point


# =============================================================================
# REFINE
# =============================================================================


def refine_turning_point(
    curve1: Curve,
    curve2: Curve,
    initial_x: float,
    kind: TurningPointKind,
    config: GradientSearchConfig | None = None,
) -> tuple[Point, GradientSearchResult]:
    """
    Уточнение точки поворота разности pdf(curve2) - pdf(curve1).

    Returns:
        (Point на кривой разности, результат поиска с невязкой)
    """
    result = search_turning_point(
        difference_derivative(curve2, curve1),
        initial_x,
        kind,
        config,
    )
    point = Point(x=result.x, y=difference(curve2, curve1)(result.x))
    return point, result


def find_extrema(
    curve1: Curve,
    curve2: Curve,
    config: ExtremaConfig | None = None,
) -> DifferenceExtrema:
    """
    Глобальные минимум и максимум pdf(curve2, x) - pdf(curve1, x).

    Args:
        curve1: Первая кривая (вычитаемая)
        curve2: Вторая кривая
        config: Конфигурация сканирования и поиска

    Returns:
        DifferenceExtrema(min, max)
    """
    config = config or ExtremaConfig()

    samples = sample_difference(curve1, curve2, config)
    min_seed, max_seed = coarse_extrema(samples)
    logger.debug("coarse seeds: min=%r max=%r", min_seed, max_seed)

    min_point, min_result = refine_turning_point(curve1, curve2, min_seed.x, "min", config.search)
    max_point, max_result = refine_turning_point(curve1, curve2, max_seed.x, "max", config.search)
    logger.debug(
        "refined extrema: min=%r (%d it) max=%r (%d it)",
        min_point,
        min_result.iterations,
        max_point,
        max_result.iterations,
    )

    return DifferenceExtrema(min=min_point, max=max_point)
