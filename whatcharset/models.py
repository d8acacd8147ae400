"""Option and result records."""

from pydantic import BaseModel, ConfigDict, Field

from .constants import RESULT_FORMAT


class ScanOptions(BaseModel):
    """Parsed command line."""

    model_config = ConfigDict(frozen=True)

    hex_bytes: str | None = Field(default=None, description="Hex string to decode (-b)")
    text: str | None = Field(default=None, description="String to reinterpret as UTF-8 bytes (-s)")
    charset: str | None = Field(default=None, description="Single character set to decode as (-c)")
    find: str | None = Field(default=None, description="Decoded string to look for (-f)")
    strict: bool = Field(default=False, description="Treat malformed hex as fatal")
    verbose: bool = Field(default=False, description="Debug logging on stderr")

    @property
    def has_source(self) -> bool:
        """Whether a byte source was supplied."""
        return self.hex_bytes is not None or self.text is not None


class DecodingResult(BaseModel):
    """Text produced by decoding a byte sequence under one encoding."""

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(..., description="Encoding name as reported to the user")
    text: str = Field(..., description="Decoded text")

    def render(self) -> str:
        """Format as an output line."""
        return RESULT_FORMAT.format(encoding=self.encoding, text=self.text)

    def __str__(self) -> str:
        return self.render()
