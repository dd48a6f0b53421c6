"""Slice a `gradle dependencies` report into one line block per configuration."""

from __future__ import annotations

from collections.abc import Iterable


BLOCK_START = "+"
NO_PREVIOUS_LINE = ""


def extract_blocks(lines: Iterable[str]) -> list[list[str]]:
    """Group report lines into configuration blocks.

    A block starts at the first `+` line seen outside a block; the line just
    before it is the configuration header and becomes the block's first entry.
    A whitespace-only line ends the block. Everything outside blocks is dropped.

    Args:
        lines: Report lines, with or without trailing line terminators.

    Returns:
        Blocks in report order, each `[header, dependency_line, ...]`.
    """
    blocks: list[list[str]] = []
    current: list[str] = []
    previous = NO_PREVIOUS_LINE
    in_block = False

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not in_block:
            if line.startswith(BLOCK_START):
                current = [previous, line]
                blocks.append(current)
                in_block = True
            else:
                previous = line
        elif not line.strip():
            in_block = False
        else:
            current.append(line)

    return blocks
