"""Sequence / repetition scanner.

Walks a fragment holding ``x``-separated siblings and parenthesised
groups and turns it into an ordered list of Steps and RepetitionBlocks.
The scanner and the block parser call each other, so recursion depth
follows the nesting depth of the notation, capped at
``MAX_NESTING_DEPTH`` blocks.

Disambiguation rules:
    * `` x `` (lowercase, whitespace on both sides) separates siblings.
      An ``x`` glued to a token is ordinary text.
    * When the text accumulated so far is a bare integer, the following
      `` x `` is a repetition header, not a separator:
      ``400 TL x 3 x 200 TS`` is one step and one 3-times block.
    * ``( ... )`` starting with ``<int> x`` is a nested block. Any other
      parenthesised text is kept verbatim in the current fragment.
"""

from __future__ import annotations

import re

from notation_parser.models.workout import RepetitionBlock, WorkoutItem
from notation_parser.steps import parse_step, parse_steps

REPETITION_RE = re.compile(r"^(\d+)\s*x\s*(.+)$", re.IGNORECASE | re.DOTALL)
REPETITION_HEADER_RE = re.compile(r"^\d+\s*x", re.IGNORECASE)
_DANGLING_HEADER_RE = re.compile(r"^\d+\s*x$", re.IGNORECASE)
_BARE_COUNT_RE = re.compile(r"^\d+$")

# Blocks nested deeper than this are dropped like any unparseable group.
MAX_NESTING_DEPTH = 64


def find_closing_paren(text: str, open_index: int) -> int:
    """Return the index of the ``)`` matching the ``(`` at *open_index*.

    Returns -1 when the group is never closed.
    """
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return -1


def strip_wrapping_parens(text: str) -> str:
    """Remove one pair of parentheses when they enclose the whole text."""
    text = text.strip()
    if text.startswith("(") and find_closing_paren(text, 0) == len(text) - 1:
        return text[1:-1].strip()
    return text


def parse_repetition_block(text: str, depth: int = 0) -> RepetitionBlock | None:
    """Parse ``<int> x <content>`` into a block.

    *depth* is the number of enclosing blocks. Returns None when the text
    is not a repetition, when the count is zero, when the content yields
    no items, or when *depth* reaches ``MAX_NESTING_DEPTH``.
    """
    if depth >= MAX_NESTING_DEPTH:
        return None
    match = REPETITION_RE.match(text.strip())
    if not match:
        return None
    times = int(match.group(1))
    if times <= 0:
        return None
    items = parse_sequence(strip_wrapping_parens(match.group(2)), depth + 1)
    if not items:
        return None
    return RepetitionBlock(times=times, items=tuple(items))


def parse_sequence(text: str, depth: int = 0) -> list[WorkoutItem]:
    """Scan *text* left to right into Steps and nested RepetitionBlocks."""
    items: list[WorkoutItem] = []
    current = ""
    index = 0
    length = len(text)

    while index < length:
        char = text[index]

        if char == "(":
            close = find_closing_paren(text, index)
            end = close if close != -1 else length
            group = text[index:end + 1]
            inner = text[index + 1:end].strip()
            index = end + 1

            if _DANGLING_HEADER_RE.match(current.strip()):
                # "3 x (...)": the group is the body of that header.
                current += group
            elif REPETITION_HEADER_RE.match(inner):
                _flush(current, items, depth)
                current = ""
                block = parse_repetition_block(inner, depth)
                if block is not None:
                    items.append(block)
            else:
                current += group
            continue

        if char == "x" and _is_separator(text, index):
            if _BARE_COUNT_RE.match(current.strip()):
                current += char
            else:
                _flush(current, items, depth)
                current = ""
            index += 1
            continue

        current += char
        index += 1

    _flush(current, items, depth)
    return items


def _is_separator(text: str, index: int) -> bool:
    """An ``x`` with whitespace on both sides."""
    return (
        0 < index < len(text) - 1
        and text[index - 1].isspace()
        and text[index + 1].isspace()
    )


def _flush(fragment: str, items: list[WorkoutItem], depth: int) -> None:
    """Parse an accumulated fragment and append whatever it yields."""
    fragment = fragment.strip()
    if not fragment:
        return
    if REPETITION_HEADER_RE.match(fragment):
        block = parse_repetition_block(fragment, depth)
        if block is not None:
            items.append(block)
            return
        step = parse_step(fragment)
        if step is not None:
            items.append(step)
        return
    items.extend(parse_steps(fragment))
