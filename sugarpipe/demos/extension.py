"""
Reads one line from the console and shows it before and after `fizzle`.
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..extensions import fizzle

PROMPT = "Type a string to fizzle and press enter"


def read_line(stream: TextIO) -> str:
    """Reads one line without its line ending. End of input reads as ""."""
    line = stream.readline()
    return line.rstrip("\r\n")


def render(text: str) -> str:
    """Formats the block printed after the user has typed `text`."""
    return f"\nYou typed: {text}\nFizzed String: {fizzle(text)}"


def main(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print(PROMPT, file=stdout)
    text = read_line(stdin)
    print(render(text), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
