"""
ABI Encoding — упаковка fixed-point записей в байты для EVM

Запись — словарь (возможно вложенный) имён полей в int256; порядок ключей
совпадает с порядком полей on-chain структуры. Словарь превращается в
ABI-кортеж, тип выводится из формы записи:

    {"x": 1}                                   -> int256
    {"c1": {"mean": 1, "std_dev": 2}, "x": 3}  -> ((int256,int256),int256)

Само кодирование выполняет eth-abi.
"""

from typing import Any, Mapping

from eth_abi import encode


def abi_type(record: Any) -> str:
    """
    ABI-тип записи: int -> int256, Mapping -> кортеж типов полей.

    Raises:
        TypeError: Если лист записи не int
    """
    if isinstance(record, Mapping):
        return "(" + ",".join(abi_type(value) for value in record.values()) + ")"
    if isinstance(record, int) and not isinstance(record, bool):
        return "int256"
    raise TypeError(f"Record leaves must be int, got {type(record).__name__}")


def abi_value(record: Any) -> Any:
    """Значение записи в форме, принимаемой eth-abi (Mapping -> tuple)."""
    if isinstance(record, Mapping):
        return tuple(abi_value(value) for value in record.values())
    return record


def encode_record(record: Mapping[str, Any]) -> bytes:
    """
    ABI-кодирование записи.

    Запись с одним скалярным полем кодируется как одиночный параметр
    (`int256 x`), иначе — как один параметр-структура.
    """
    values = list(record.values())
    if len(values) == 1 and not isinstance(values[0], Mapping):
        return encode([abi_type(values[0])], [values[0]])
    return encode([abi_type(record)], [abi_value(record)])


def encode_record_hex(record: Mapping[str, Any]) -> str:
    """ABI-кодирование записи в hex-строку с префиксом 0x."""
    return "0x" + encode_record(record).hex()
