"""Registry of the text encodings provided by the codec registry."""

import codecs
import encodings
import logging
import pkgutil
from dataclasses import dataclass
from encodings.aliases import aliases

from .constants import DECODE_ERRORS, DISPLAY_NAMES
from .errors import UnsupportedEncodingError


@dataclass(frozen=True)
class Charset:
    """A text encoding known to the codec registry."""

    name: str  # display name
    codec: str  # Python canonical codec name

    def decode(self, data: bytes) -> str:
        """Decode bytes, replacing malformed input with U+FFFD."""
        return data.decode(self.codec, DECODE_ERRORS)


def _key(codec_name: str) -> str:
    return encodings.normalize_encoding(codec_name).lower()


def display_name(codec_name: str) -> str:
    """Return the IANA name for a codec, or the codec name itself."""
    return DISPLAY_NAMES.get(_key(codec_name), codec_name)


# Charset registry, keyed by normalized codec name
_CHARSETS: dict[str, Charset] = {}


def register_charset(charset: Charset) -> None:
    """Register a charset."""
    _CHARSETS[_key(charset.codec)] = charset


def get_charset(name: str) -> Charset:
    """Get a charset by any name or alias ``codecs.lookup`` accepts.

    Raises:
        UnsupportedEncodingError: if the name is unknown, or names a codec
            that is not a text encoding.
    """
    try:
        info = codecs.lookup(name)
    except (LookupError, ValueError):
        raise UnsupportedEncodingError(name) from None

    charset = _CHARSETS.get(_key(info.name))
    if charset is None:
        raise UnsupportedEncodingError(name)
    return charset


def is_supported(name: str) -> bool:
    """Whether ``name`` resolves to a registered charset."""
    try:
        get_charset(name)
    except UnsupportedEncodingError:
        return False
    return True


def list_charsets() -> list[Charset]:
    """List registered charsets, ordered case-insensitively by display name."""
    return sorted(_CHARSETS.values(), key=lambda charset: charset.name.lower())


def available_charsets() -> dict[str, Charset]:
    """Map display name to charset, in ``list_charsets`` order."""
    return {charset.name: charset for charset in list_charsets()}


# ----------------------------------------------------------------------------
# Platform discovery
# ----------------------------------------------------------------------------


def _candidate_names() -> set[str]:
    names = set(aliases.values())
    names.update(module.name for module in pkgutil.iter_modules(encodings.__path__))
    return names


def _probe(name: str) -> Charset | None:
    """Build a charset for ``name`` if it is a usable text encoding."""
    try:
        info = codecs.lookup(name)
    except (LookupError, ImportError):
        return None

    # bytes-to-bytes and str-to-str codecs (base64, zlib, rot13) are not charsets
    if not getattr(info, "_is_text_encoding", True):
        return None

    try:
        info.decode(b"", DECODE_ERRORS)
    except (UnicodeError, LookupError) as e:
        logging.debug("Skipping codec %s: %s", info.name, e)
        return None

    return Charset(name=display_name(info.name), codec=info.name)


def _register_platform_charsets() -> None:
    for name in sorted(_candidate_names()):
        charset = _probe(name)
        if charset is not None:
            register_charset(charset)


_register_platform_charsets()
