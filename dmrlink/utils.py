"""Bit conversion, hex dumps and timestamps."""

import logging
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Sequence

logger = logging.getLogger(__name__)

_BYTES_PER_LINE = 16


def _printable(value: int) -> str:
    return chr(value) if 0x20 <= value <= 0x7E else "."


def hex_dump_lines(data: bytes) -> Iterator[str]:
    """Yield the lines of a hex and ASCII dump, 16 bytes per line."""
    data = bytes(data)
    for offset in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[offset:offset + _BYTES_PER_LINE]
        hex_part = "".join(f"{b:02X} " for b in chunk)
        hex_part += "   " * (_BYTES_PER_LINE - len(chunk))
        text = "".join(_printable(b) for b in chunk)
        yield f"{offset:04X}:  {hex_part}   *{text}*"


def dump(title: str, data: bytes, level: int = logging.DEBUG) -> None:
    """Log a title followed by a hex dump of the data."""
    logger.log(level, "%s", title)
    for line in hex_dump_lines(data):
        logger.log(level, "%s", line)


def dump_bits(title: str, bits: Sequence[bool], level: int = logging.DEBUG) -> None:
    """Pack bits MSB first into bytes and log their hex dump."""
    packed = bytearray()
    for start in range(0, len(bits), 8):
        group = list(bits[start:start + 8])
        group.extend([False] * (8 - len(group)))
        packed.append(bits_to_byte_be(group))
    dump(title, bytes(packed), level)


def byte_to_bits_be(byte: int) -> List[bool]:
    """Return the eight bits of a byte, most significant first."""
    return [bool(byte & (0x80 >> i)) for i in range(8)]


def byte_to_bits_le(byte: int) -> List[bool]:
    """Return the eight bits of a byte, least significant first."""
    return [bool(byte & (0x01 << i)) for i in range(8)]


def _first_eight(bits: Iterable[bool]) -> List[bool]:
    group = list(bits)[:8]
    if len(group) < 8:
        raise ValueError(f"eight bits are needed, got {len(group)}")
    return group


def bits_to_byte_be(bits: Sequence[bool]) -> int:
    """Pack eight bits, most significant first, into a byte."""
    value = 0
    for bit in _first_eight(bits):
        value = (value << 1) | (1 if bit else 0)
    return value


def bits_to_byte_le(bits: Sequence[bool]) -> int:
    """Pack eight bits, least significant first, into a byte."""
    return sum(1 << i for i, bit in enumerate(_first_eight(bits)) if bit)


def create_timestamp() -> str:
    """Return the current UTC time as 'YYYY-MM-DD HH:MM:SS.mmm'."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%d %H:%M:%S") + f".{now.microsecond // 1000:03d}"