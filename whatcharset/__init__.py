# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""WhatCharacterSet - Find out which character set mangled a string.

Decodes a byte sequence under every text encoding in the codec registry and
reports the results, so the misinterpretation that produced a garbled string
(typically after a database round-trip) can be identified.

The package provides:
- A charset registry built from the standard library codec registry
- Byte-source resolution from hex literals or UTF-8 re-encoded text
- Single-charset decoding and an all-charsets scan with exact-match filtering
- The ``whatcharset`` command-line tool
"""

# Import public API from modules
from .charsets import (
    Charset,
    available_charsets,
    display_name,
    get_charset,
    is_supported,
    list_charsets,
    register_charset,
)
from .constants import (
    DECODE_ERRORS,
    DISPLAY_NAMES,
    PROG_NAME,
    RESULT_FORMAT,
    ExitCode,
)
from .errors import (
    ArgumentParseError,
    CharsetDecodeError,
    HexDecodeError,
    MissingInputError,
    UnsupportedEncodingError,
    WhatCharsetError,
)
from .models import DecodingResult, ScanOptions
from .scanner import decode_as, run, scan
from .source import from_hex, from_text, resolve_bytes

# Public API exports
__all__ = [
    # Core classes
    "Charset",
    "DecodingResult",
    "ScanOptions",
    # Constants and enums
    "PROG_NAME",
    "DECODE_ERRORS",
    "RESULT_FORMAT",
    "DISPLAY_NAMES",
    "ExitCode",
    # Errors
    "WhatCharsetError",
    "ArgumentParseError",
    "CharsetDecodeError",
    "HexDecodeError",
    "UnsupportedEncodingError",
    "MissingInputError",
    # Charset registry
    "available_charsets",
    "display_name",
    "get_charset",
    "is_supported",
    "list_charsets",
    "register_charset",
    # Byte sources
    "from_hex",
    "from_text",
    "resolve_bytes",
    # Decoding
    "decode_as",
    "scan",
    "run",
]
