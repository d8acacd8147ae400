"""Exceptions raised by WhatCharacterSet."""

from .constants import ExitCode


class WhatCharsetError(Exception):
    """Base class for user-facing errors."""

    exit_code: ExitCode = ExitCode.ERROR


class ArgumentParseError(WhatCharsetError):
    """Malformed command line."""


class HexDecodeError(WhatCharsetError, ValueError):
    """A ``-b`` payload that is not a sequence of hex digit pairs."""


class UnsupportedEncodingError(WhatCharsetError, LookupError):
    """A character set the codec registry does not provide."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Character set {name} is unsupported")


class MissingInputError(WhatCharsetError):
    """Neither a byte string nor a text string was supplied."""

    def __init__(self) -> None:
        super().__init__("No string supplied")


class CharsetDecodeError(WhatCharsetError):
    """A codec that fails even with the replacement error handler."""

    def __init__(self, name: str, reason: Exception):
        self.name = name
        self.reason = reason
        super().__init__(f"Interpreting as {name} failed: {reason}")
