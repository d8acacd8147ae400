#!/usr/bin/env python3
"""Demo of the mojibake recovery workflow."""

from . import cli

# "Ríkarðsdóttir" stored as UTF-8 and read back as a single-byte charset
ORIGINAL = "R\u00edkar\u00f0sd\u00f3ttir"
MANGLED = "R\u00c3\u00adkar\u00c3\u00b0sd\u00c3\u00b3ttir"


def run_demo(emit=print) -> None:
    """Run the demo."""
    emit("WhatCharacterSet Demo - Finding a charset mix-up")
    emit("=" * 48)

    emit("\nWhich character sets turn the UTF-8 bytes into the mangled text?")
    cli.main(["-s", ORIGINAL, "-f", MANGLED], emit)

    emit("\nThe same bytes, given as hex from the database:")
    cli.main(["-b", ORIGINAL.encode("utf-8").hex().upper(), "-c", "windows-1252"], emit)

    emit("\nRead back correctly:")
    cli.main(["-s", ORIGINAL, "-c", "UTF-8"], emit)

    emit("\nDemo completed!")


def main():
    """Main entry point for the demo."""
    cli.configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
