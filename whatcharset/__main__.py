"""Allow ``python -m whatcharset``."""

from .cli import run

run()
