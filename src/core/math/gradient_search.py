"""
Adaptive Gradient Search — поиск нуля производной (точки поворота)

Одномерный поиск точки, где производная целевой функции обращается в ноль,
с адаптивным шагом и подавлением осцилляций:

1. gradient = derivative(x); для "max" используется -derivative (подъём)
2. |gradient| < tolerance → проба derivative(x + probe_offset):
   принимаем x только если кривизна соответствует виду экстремума
3. Смена знака gradient → счётчик осцилляций; при > 2 шаг *= reduction
4. x ← x - step * gradient
5. После max_iterations возвращается последний x (без исключения)

Состояние поиска (x, шаг, знак предыдущего градиента, счётчик осцилляций)
передаётся между итерациями как immutable значение.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Callable, Final, Literal

from src.core.math.numerical_safeguards import sign, validate_finite, validate_positive

logger = logging.getLogger(__name__)

TurningPointKind = Literal["min", "max"]

TURNING_POINT_KINDS: Final[tuple[str, ...]] = ("min", "max")

# Смещение пробной точки для проверки кривизны
PROBE_OFFSET: Final[float] = 1e-4

# Смен знака градиента до уменьшения шага
OSCILLATION_THRESHOLD: Final[int] = 2


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GradientSearchConfig:
    """Параметры поиска точки поворота (значения по умолчанию генератора PdfLib)."""

    step_size: float = 0.01
    max_iterations: int = 10_000
    tolerance: float = 1e-6
    step_reduction_factor: float = 0.5
    probe_offset: float = PROBE_OFFSET

    def __post_init__(self) -> None:
        validate_positive(self.step_size, "step_size")
        validate_positive(self.tolerance, "tolerance")
        validate_positive(self.probe_offset, "probe_offset")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if not 0 < self.step_reduction_factor < 1:
            raise ValueError(
                f"step_reduction_factor must be in (0, 1), got {self.step_reduction_factor}"
            )


# =============================================================================
# STATE / RESULT
# =============================================================================


@dataclass(frozen=True)
class GradientSearchState:
    """Состояние одной итерации поиска."""

    x: float
    step_size: float
    previous_gradient_sign: int
    oscillation_count: int


@dataclass(frozen=True)
class GradientSearchResult:
    """Результат поиска.

    gradient — невязка производной в точке x (для диагностики сходимости).
    converged=False означает, что бюджет итераций исчерпан.
    """

    x: float
    gradient: float
    iterations: int
    converged: bool
    final_step_size: float


# =============================================================================
# SEARCH
# =============================================================================


def _dampen(state: GradientSearchState, gradient: float, reduction: float) -> GradientSearchState:
    """Подавление осцилляций: уменьшение шага после повторных смен знака."""
    gradient_sign = sign(gradient)
    if gradient_sign == state.previous_gradient_sign:
        return state

    oscillation_count = state.oscillation_count + 1
    step_size = state.step_size
    if oscillation_count > OSCILLATION_THRESHOLD:
        step_size *= reduction
        oscillation_count = 0

    return replace(state, step_size=step_size, oscillation_count=oscillation_count)


def _is_turning_point(
    derivative: Callable[[float], float],
    x: float,
    gradient: float,
    probe_offset: float,
) -> bool:
    """Проба кривизны: для направленной производной она обязана возрастать."""
    return derivative(x + probe_offset) > gradient


def search_turning_point(
    derivative: Callable[[float], float],
    initial_x: float,
    kind: TurningPointKind,
    config: GradientSearchConfig | None = None,
) -> GradientSearchResult:
    """
    Поиск точки поворота заданного вида вблизи initial_x.

    Для "min" спуск идёт по derivative, для "max" по -derivative; в обоих
    случаях направленная производная в найденной точке должна возрастать
    (для исходной производной: возрастать у минимума, убывать у максимума).

    Args:
        derivative: Производная целевой функции
        initial_x: Начальное приближение (например, из грубого сканирования)
        kind: "min" или "max"
        config: Параметры поиска (default: GradientSearchConfig())

    Returns:
        GradientSearchResult с x, невязкой производной и признаком сходимости

    Raises:
        ValueError: Если kind неизвестен или initial_x NaN/Inf
    """
    if kind not in TURNING_POINT_KINDS:
        raise ValueError(f"kind must be one of {TURNING_POINT_KINDS}, got {kind!r}")
    validate_finite(initial_x, "initial_x")

    config = config or GradientSearchConfig()

    def directed(x: float) -> float:
        return -derivative(x) if kind == "max" else derivative(x)

    state = GradientSearchState(
        x=initial_x,
        step_size=config.step_size,
        previous_gradient_sign=sign(math.inf),
        oscillation_count=0,
    )

    for iteration in range(config.max_iterations):
        gradient = directed(state.x)

        if abs(gradient) < config.tolerance and _is_turning_point(
            directed, state.x, gradient, config.probe_offset
        ):
            return GradientSearchResult(
                x=state.x,
                gradient=derivative(state.x),
                iterations=iteration,
                converged=True,
                final_step_size=state.step_size,
            )

        state = _dampen(state, gradient, config.step_reduction_factor)
        state = replace(
            state,
            x=state.x - state.step_size * gradient,
            previous_gradient_sign=sign(gradient),
        )

    residual = derivative(state.x)
    logger.warning(
        "turning point search (%s) did not converge in %d iterations: x=%r residual=%r",
        kind,
        config.max_iterations,
        state.x,
        residual,
    )
    return GradientSearchResult(
        x=state.x,
        gradient=residual,
        iterations=config.max_iterations,
        converged=False,
        final_step_size=state.step_size,
    )


def find_root(
    derivative: Callable[[float], float],
    initial_x: float,
    step_size: float,
    max_iterations: int,
    tolerance: float,
    step_reduction_factor: float,
    kind: TurningPointKind,
) -> float:
    """
    Упрощённый интерфейс поиска: возвращает только x.

    Эквивалентен search_turning_point(...).x с явными параметрами.
    """
    config = GradientSearchConfig(
        step_size=step_size,
        max_iterations=max_iterations,
        tolerance=tolerance,
        step_reduction_factor=step_reduction_factor,
    )
    return search_turning_point(derivative, initial_x, kind, config).x
