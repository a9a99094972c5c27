"""
Fixed-Point Quantizer — перевод float в 18-десятичное fixed-point целое

Семантика on-chain int256 с 18 дробными десятичными знаками:

    q(value) = trunc(value * 10^18)      (округление к нулю, не к ближайшему)

Алгоритм:
1. Десятичное представление value с максимальной точностью, которую несёт
   double (кратчайшая строка, однозначно восстанавливающая float: repr)
2. Разложение в (coefficient, exponent), 1 <= |coefficient| < 10
3. trunc(coefficient * 10^(exponent + 18)) в целочисленной арифметике
   произвольной точности (одна формула для любого знака exponent)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет промежуточного округления float → строка с потерей точности
2. Значения меньше 1e-18 по модулю дают 0 (underflow не ошибка)
3. Выход за диапазон int256 — ошибка (FixedPointOverflow), не усечение
4. "0.12", "1.2e-1" и 0.12 дают одно и то же целое
5. NaN/Inf — ошибка (QuantizationError), никогда не кодируется как 0
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Mapping

# Количество дробных десятичных знаков fixed-point представления
FIXED_POINT_DECIMALS: Final[int] = 18

# 10^18
FIXED_POINT_ONE: Final[int] = 10**FIXED_POINT_DECIMALS

# Границы int256
INT256_MIN: Final[int] = -(2**255)
INT256_MAX: Final[int] = 2**255 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class QuantizationError(ValueError):
    """Значение не может быть представлено в fixed-point (NaN, Inf, не число)."""


class FixedPointOverflow(QuantizationError):
    """
    Результат квантования вне диапазона int256.

    Усечение до границы запрещено: такой вектор молча исказил бы тест.
    """


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


def _to_decimal(value: float | int | str | Decimal) -> Decimal:
    """Точное десятичное значение входа (для float — по кратчайшему repr)."""
    if isinstance(value, bool):
        raise QuantizationError(f"Cannot quantize boolean value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise QuantizationError(f"Cannot quantize non-finite value: {value!r}")
        # repr(float) — кратчайшая строка, восстанавливающая тот же double
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise QuantizationError(f"Cannot quantize non-numeric string: {value!r}") from None
    else:
        raise QuantizationError(f"Unsupported value type: {type(value).__name__}")

    if not result.is_finite():
        raise QuantizationError(f"Cannot quantize non-finite value: {value!r}")
    return result


def scientific_decomposition(value: float | int | str | Decimal) -> tuple[Decimal, int]:
    """
    Нормализованная научная запись value = coefficient * 10^exponent.

    Разложение точное: coefficient собирается из цифр value без участия
    decimal-контекста (без округления до 28 знаков).

    Returns:
        (coefficient, exponent), где 1 <= |coefficient| < 10
        (для нуля: (Decimal(0), 0))

    Examples:
        >>> scientific_decomposition(3.6)
        (Decimal('3.6'), 0)
        >>> scientific_decomposition(-2.0568613326757935e-17)
        (Decimal('-2.0568613326757935'), -17)
    """
    sign_bit, digits, exponent = _to_decimal(value).as_tuple()
    if not any(digits):
        return Decimal(0), 0

    while digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1

    fraction_digits = len(digits) - 1
    coefficient = Decimal((sign_bit, digits, -fraction_digits))
    return coefficient, exponent + fraction_digits


# =============================================================================
# КВАНТОВАНИЕ
# =============================================================================


def to_fixed_point_integer(value: float | int | str | Decimal) -> int:
    """
    trunc(value * 10^18) как целое произвольной точности.

    Args:
        value: float, int, Decimal или десятичная строка
               (обычная "0.12" или научная "1.2e-1")

    Returns:
        Знаковое целое в диапазоне int256

    Raises:
        QuantizationError: Если value NaN/Inf или не число
        FixedPointOverflow: Если результат вне диапазона int256

    Examples:
        >>> to_fixed_point_integer(3.6)
        3600000000000000000
        >>> to_fixed_point_integer(-2.0568613326757935e-17)
        -20
        >>> to_fixed_point_integer(1e-19)
        0
    """
    coefficient, exponent = scientific_decomposition(value)
    sign_bit, digits, coefficient_exponent = coefficient.as_tuple()

    mantissa = int("".join(str(d) for d in digits))
    shift = coefficient_exponent + exponent + FIXED_POINT_DECIMALS

    # Модуль масштабируется отдельно от знака: целочисленное деление
    # модуля и есть усечение к нулю
    if shift >= 0:
        magnitude = mantissa * 10**shift
    else:
        magnitude = mantissa // 10**-shift

    result = -magnitude if sign_bit else magnitude

    if not INT256_MIN <= result <= INT256_MAX:
        raise FixedPointOverflow(
            f"Fixed-point value {value!r} does not fit int256 "
            f"(|value * 10^{FIXED_POINT_DECIMALS}| has {len(str(magnitude))} digits)"
        )

    return result


def from_fixed_point_integer(value: int) -> Decimal:
    """
    Обратное масштабирование: value / 10^18 без потери точности.

    Decimal собирается из цифр напрямую: арифметика Decimal округляет
    до точности контекста (28 знаков), а int256 содержит до 77 цифр.

    Examples:
        >>> from_fixed_point_integer(120000000000000000)
        Decimal('0.120000000000000000')
    """
    digits = tuple(int(d) for d in str(abs(value)))
    return Decimal((1 if value < 0 else 0, digits, -FIXED_POINT_DECIMALS))


def quantize_tree(data: Any) -> Any:
    """
    Квантование всех числовых листьев вложенной структуры.

    Mapping → dict с тем же порядком ключей, list/tuple → list того же
    порядка, float/int → fixed-point int. Прочие значения не изменяются.
    """
    if isinstance(data, bool):
        return data
    if isinstance(data, (int, float, Decimal)):
        return to_fixed_point_integer(data)
    if isinstance(data, Mapping):
        return {key: quantize_tree(item) for key, item in data.items()}
    if isinstance(data, (list, tuple)):
        return [quantize_tree(item) for item in data]
    return data
