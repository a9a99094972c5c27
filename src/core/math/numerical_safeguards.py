"""
Numerical Safeguards — проверки входов для гауссовых вычислений

Модуль обеспечивает проверку параметров до входа в вычислительное ядро:
- NaN/Inf детекция (невалидные значения не должны доходить до ядра)
- Валидация положительных параметров (std_dev > 0)
- Знак числа с семантикой IEEE (sign(0) == 0, sign(±inf) == ±1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный std_dev отвергается до вычисления pdf (никакого NaN/Inf на выходе)
2. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sign(value: float) -> int:
    """
    Знак числа: -1, 0 или +1.

    Для NaN возвращает 0 (сравнения с NaN всегда ложны).

    Examples:
        >>> sign(-3.5)
        -1
        >>> sign(0.0)
        0
        >>> sign(float("inf"))
        1
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Используется для std_dev: при std_dev <= 0 pdf не определена
    (деление на ноль или отрицательная плотность).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive (> 0), got {value}")
