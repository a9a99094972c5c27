"""
CLI — генерация эталонных векторов PdfLib

Usage:
    pdf-vectors calculatePdf 0 1 0.5
    pdf-vectors calculateCurvePoints 0 1 2 1 0.5
    pdf-vectors --log-level DEBUG calculateDerivative 0 1 -2e-3
    pdf-vectors calculatePdf 0 1 0.5 --log-level INFO

Результат — hex ABI-кодирования на stdout (одна строка), логи на stderr.
Коды выхода: 0 — успех, 1 — ошибка квантования или контракта записи,
2 — невалидный вход.
"""

import argparse
import logging
import math
import sys
from typing import Callable, Dict, List, Optional, Sequence

import jsonschema

from src.core.math.fixed_point import QuantizationError
from src.vectors.assembly import (
    curve_points_record,
    derivative_record,
    pdf_difference_record,
    pdf_record,
    second_derivative_record,
)
from src.vectors.encoding import encode_record_hex

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Неизвестная операция, неверное число аргументов или не число."""


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


def parse_numeric(text: str, name: str) -> float:
    """
    Разбор числового аргумента.

    Raises:
        InvalidInputError: Если text не число или NaN/Inf
    """
    try:
        value = float(text)
    except ValueError:
        value = math.nan

    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number, got {text!r}")
    return value


def _parse_args(
    operation: str,
    args: List[str],
    required: List[str],
    optional: Sequence[str] = (),
) -> List[float]:
    max_count = len(required) + len(optional)
    if not len(required) <= len(args) <= max_count:
        expected = " ".join(list(required) + [f"[{name}]" for name in optional])
        raise InvalidInputError(f"{operation} expects: {expected}; got {len(args)} argument(s)")

    names = list(required) + list(optional)
    return [parse_numeric(text, name) for text, name in zip(args, names)]


# =============================================================================
# OPERATIONS
# =============================================================================


def calculate_pdf(args: List[str]) -> str:
    """calculatePdf mean stdDev x [scale] -> int256."""
    values = _parse_args("calculatePdf", args, ["mean", "stdDev", "x"], ["scale"])
    return encode_record_hex(pdf_record(*values))


def calculate_derivative(args: List[str]) -> str:
    """calculateDerivative mean stdDev x [scale] -> int256."""
    values = _parse_args("calculateDerivative", args, ["mean", "stdDev", "x"], ["scale"])
    return encode_record_hex(derivative_record(*values))


def calculate_second_derivative(args: List[str]) -> str:
    """calculateSecondDerivative mean stdDev x [scale] -> int256."""
    values = _parse_args("calculateSecondDerivative", args, ["mean", "stdDev", "x"], ["scale"])
    return encode_record_hex(second_derivative_record(*values))


def calculate_pdf_difference(args: List[str]) -> str:
    """calculatePdfDifference mean1 stdDev1 mean2 stdDev2 x -> int256 (pdf1 - pdf2)."""
    values = _parse_args(
        "calculatePdfDifference", args, ["mean1", "stdDev1", "mean2", "stdDev2", "x"]
    )
    return encode_record_hex(pdf_difference_record(*values))


def calculate_curve_points(args: List[str]) -> str:
    """calculateCurvePoints mean1 stdDev1 mean2 stdDev2 x [scale] -> PdfTestData."""
    values = _parse_args(
        "calculateCurvePoints",
        args,
        ["mean1", "stdDev1", "mean2", "stdDev2", "x"],
        ["scale"],
    )
    return encode_record_hex(curve_points_record(*values))


OPERATIONS: Dict[str, Callable[[List[str]], str]] = {
    "calculatePdf": calculate_pdf,
    "calculateCurvePoints": calculate_curve_points,
    "calculateDerivative": calculate_derivative,
    "calculateSecondDerivative": calculate_second_derivative,
    "calculatePdfDifference": calculate_pdf_difference,
}


def run(inputs: List[str]) -> str:
    """
    Диспетчер: inputs[0] — имя операции, остальное — числовые аргументы.

    Returns:
        hex ABI-кодирования результата

    Raises:
        InvalidInputError: Неизвестная операция или невалидные аргументы
        ValueError: Невалидные параметры кривой (std_dev <= 0)
        QuantizationError: Результат не представим в int256
    """
    if not inputs:
        raise InvalidInputError(f"operation is required, one of: {', '.join(OPERATIONS)}")

    operation, args = inputs[0], list(inputs[1:])
    handler = OPERATIONS.get(operation)
    if handler is None:
        raise InvalidInputError(
            f"unknown operation {operation!r}, expected one of: {', '.join(OPERATIONS)}"
        )

    logger.info("running %s with %s", operation, args)
    return handler(args)


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-vectors",
        description="Generate ABI-encoded reference vectors for the on-chain PdfLib.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)",
    )
    parser.add_argument("operation", help=f"One of: {', '.join(OPERATIONS)}")
    # REMAINDER: отрицательные числа в научной записи (-2e-3) не должны
    # разбираться как опции
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Numeric arguments")
    return parser


def _split_trailing_options(args: List[str]) -> tuple[List[str], List[str]]:
    """Отделяет --log-level, указанный после имени операции, от числовых аргументов."""
    options: List[str] = []
    rest: List[str] = []
    tokens = iter(args)
    for token in tokens:
        if token == "--log-level":
            options.append(token)
            value = next(tokens, None)
            if value is not None:
                options.append(value)
        elif token.startswith("--log-level="):
            options.append(token)
        else:
            rest.append(token)
    return options, rest


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    namespace = parser.parse_args(argv)

    options, args = _split_trailing_options(namespace.args)
    if options:
        namespace.log_level = parser.parse_args(options + [namespace.operation]).log_level

    logging.basicConfig(
        level=getattr(logging, namespace.log_level),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr,
    )

    args = [arg for arg in args if arg != "--"]
    try:
        encoded = run([namespace.operation] + args)
    except QuantizationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except jsonschema.ValidationError as e:
        print(f"error: record violates contract: {e.message}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(encoded)
    return 0
