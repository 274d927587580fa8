"""Small helpers for laying out plain-text reports."""

from __future__ import annotations

import itertools
import textwrap


def _lines(s: str) -> list[str]:
    if not s:
        return []
    lines = s.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _wrap(s: str, width: int) -> str:
    return "\n".join(
        textwrap.fill(line, width, break_long_words=False, break_on_hyphens=False)
        for line in s.split("\n")
    )


def first_word(s: str, width: int) -> str:
    """The leading words of ``s`` that fit in fewer than ``width`` characters."""
    out = ""
    while s:
        space = s.find(" ")
        if space > 0 and len(out) + space < width:
            if out:
                out += " "
            out += s[:space]
            s = s[space + 1:]
            continue
        if len(out) + len(s) < width:
            out += s
        break
    return out


def line_length(s: str) -> int:
    """The length of the longest line in ``s``."""
    return max((len(line) for line in _lines(s)), default=0)


def paste(left: str, right: str, sep_width: int, left_len: int) -> str:
    """Place two blocks of text side by side.

    A positive ``left_len`` wraps both blocks to that width; a negative one
    only sets the width of the left column; zero uses the left block's widest line.
    """
    if left_len > 0:
        left = _wrap(left, left_len)
        right = _wrap(right, left_len)
    elif left_len < 0:
        left_len = -left_len
    else:
        left_len = line_length(left)
    out = []
    for l1, l2 in itertools.zip_longest(_lines(left), _lines(right), fillvalue=""):
        line = l1.ljust(left_len)
        if l2:
            line += " " * sep_width + l2
        out.append(line + "\n")
    return "".join(out)