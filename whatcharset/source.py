"""Byte-source resolution: hex literals and UTF-8 re-encoding."""

import logging
import string
from collections.abc import Callable

from .errors import HexDecodeError, MissingInputError
from .models import ScanOptions


def from_hex(value: str) -> bytes:
    """Decode a string of hex digit pairs.

    Args:
        value: Hex digits, two per byte, either case, no separators

    Returns:
        The decoded bytes

    Raises:
        HexDecodeError: on an odd number of digits or a non-hex character
    """
    if len(value) % 2:
        raise HexDecodeError("Odd number of characters.")
    for index, char in enumerate(value):
        if char not in string.hexdigits:
            raise HexDecodeError(f"Illegal hexadecimal character {char} at index {index}")
    return bytes.fromhex(value)


def from_text(value: str) -> bytes:
    """UTF-8 encode a string.

    Lone surrogates, which is how undecodable argv bytes reach Python on
    POSIX, are turned back into the original bytes.
    """
    return value.encode("utf-8", "surrogateescape")


def resolve_bytes(options: ScanOptions, emit: Callable[[str], None] = print) -> bytes:
    """Produce the byte sequence under test, reporting what was derived.

    ``-b`` takes precedence over ``-s``. A malformed hex string is reported
    and replaced by an empty sequence unless ``options.strict`` is set.

    Args:
        options: Parsed command line
        emit: Output line callback

    Returns:
        The byte sequence to decode

    Raises:
        MissingInputError: if neither ``-b`` nor ``-s`` was given
        HexDecodeError: on malformed hex in strict mode
    """
    if options.hex_bytes is not None:
        emit(f"Got a byte string of {options.hex_bytes}")
        try:
            return from_hex(options.hex_bytes)
        except HexDecodeError as e:
            if options.strict:
                raise
            emit(str(e))
            logging.warning("Malformed hex %r, continuing with no bytes: %s", options.hex_bytes, e)
            return b""

    if options.text is not None:
        data = from_text(options.text)
        emit(f"The string ({options.text}) has {len(options.text)} characters.")
        emit(f"That consists of {len(data)} bytes.")
        emit(f"Hex stream looks like {data.hex()}")
        return data

    raise MissingInputError()
