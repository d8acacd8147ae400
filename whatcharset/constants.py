"""WhatCharacterSet constants and enums."""

from enum import IntEnum

PROG_NAME = "WhatCharacterSet"

# ----------------------------------------------------------------------------
# Exit codes
# ----------------------------------------------------------------------------


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0  # Normal completion or help
    ERROR = 1  # Missing input, bad arguments, unsupported charset


# ----------------------------------------------------------------------------
# Decoding
# ----------------------------------------------------------------------------

# Error handler for every decode; malformed input becomes U+FFFD
DECODE_ERRORS = "replace"

RESULT_FORMAT = "Interpreting as {encoding} returned {text}"

# ----------------------------------------------------------------------------
# Display names
# ----------------------------------------------------------------------------

# IANA preferred names, keyed by the normalized Python codec name
DISPLAY_NAMES: dict[str, str] = {
    "ascii": "US-ASCII",
    "utf_7": "UTF-7",
    "utf_8": "UTF-8",
    "utf_16": "UTF-16",
    "utf_16_be": "UTF-16BE",
    "utf_16_le": "UTF-16LE",
    "utf_32": "UTF-32",
    "utf_32_be": "UTF-32BE",
    "utf_32_le": "UTF-32LE",
    "iso8859_1": "ISO-8859-1",
    "iso8859_2": "ISO-8859-2",
    "iso8859_3": "ISO-8859-3",
    "iso8859_4": "ISO-8859-4",
    "iso8859_5": "ISO-8859-5",
    "iso8859_6": "ISO-8859-6",
    "iso8859_7": "ISO-8859-7",
    "iso8859_8": "ISO-8859-8",
    "iso8859_9": "ISO-8859-9",
    "iso8859_10": "ISO-8859-10",
    "iso8859_11": "ISO-8859-11",
    "iso8859_13": "ISO-8859-13",
    "iso8859_14": "ISO-8859-14",
    "iso8859_15": "ISO-8859-15",
    "iso8859_16": "ISO-8859-16",
    "cp1250": "windows-1250",
    "cp1251": "windows-1251",
    "cp1252": "windows-1252",
    "cp1253": "windows-1253",
    "cp1254": "windows-1254",
    "cp1255": "windows-1255",
    "cp1256": "windows-1256",
    "cp1257": "windows-1257",
    "cp1258": "windows-1258",
    "cp437": "IBM437",
    "cp850": "IBM850",
    "cp852": "IBM852",
    "cp855": "IBM855",
    "cp857": "IBM857",
    "cp862": "IBM862",
    "cp866": "IBM866",
    "koi8_r": "KOI8-R",
    "koi8_u": "KOI8-U",
    "mac_roman": "x-MacRoman",
    "tis_620": "TIS-620",
    "big5": "Big5",
    "big5hkscs": "Big5-HKSCS",
    "gb2312": "GB2312",
    "gbk": "GBK",
    "gb18030": "GB18030",
    "shift_jis": "Shift_JIS",
    "euc_jp": "EUC-JP",
    "euc_kr": "EUC-KR",
    "iso2022_jp": "ISO-2022-JP",
    "iso2022_kr": "ISO-2022-KR",
}
