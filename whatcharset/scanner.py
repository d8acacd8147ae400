"""Decode a byte sequence under one or every registered charset."""

import logging
from collections.abc import Callable, Iterator

from .charsets import get_charset, list_charsets
from .constants import ExitCode
from .errors import CharsetDecodeError
from .models import DecodingResult, ScanOptions
from .source import resolve_bytes


def decode_as(data: bytes, name: str) -> DecodingResult:
    """Decode ``data`` under the charset called ``name``.

    The result carries ``name`` exactly as given, not the canonical name.

    Raises:
        UnsupportedEncodingError: if ``name`` is not a registered charset
        CharsetDecodeError: if the codec rejects ``data`` outright
    """
    charset = get_charset(name)
    try:
        text = charset.decode(data)
    except UnicodeError as e:
        raise CharsetDecodeError(name, e) from e
    return DecodingResult(encoding=name, text=text)


def scan(data: bytes, find: str | None = None) -> Iterator[DecodingResult]:
    """Decode ``data`` under every registered charset.

    Args:
        data: Bytes to decode
        find: If given, only yield results whose text equals it exactly

    Yields:
        One result per charset, in registry order
    """
    for charset in list_charsets():
        try:
            text = charset.decode(data)
        except UnicodeError as e:
            logging.debug("Decoding as %s failed: %s", charset.name, e)
            continue

        if find is not None and text != find:
            continue
        yield DecodingResult(encoding=charset.name, text=text)


def run(options: ScanOptions, emit: Callable[[str], None] = print) -> ExitCode:
    """Resolve the byte source and print the decoding results."""
    data = resolve_bytes(options, emit)
    logging.debug("Decoding %d bytes: %s", len(data), data.hex())

    if options.charset is not None:
        emit(decode_as(data, options.charset).render())
        return ExitCode.OK

    matches = 0
    for result in scan(data, options.find):
        emit(result.render())
        matches += 1
    logging.debug("Printed %d results", matches)
    return ExitCode.OK
