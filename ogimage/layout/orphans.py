"""
Orphan prevention for wrapped text.

An orphan is a final line holding a single word. When one is found, the
last word of the line above is pulled down to join it, and the change is
then propagated upward so the lines above don't end up visibly longer
than the lines they feed into.
"""

from typing import Sequence


def prevent_orphans(lines: Sequence[str]) -> list[str]:
    """
    Remove a single-word last line by pulling a word down from above.

    The orphan is left in place when the line above has only one word
    itself, since moving it would just create a new orphan.

    Args:
        lines: Wrapped lines, top to bottom

    Returns:
        New list of lines (the input is never modified)
    """
    lines = list(lines)
    if len(lines) < 2:
        return lines

    last_words = lines[-1].split()
    if len(last_words) != 1:
        return lines

    prev_words = lines[-2].split()
    if len(prev_words) < 2:
        return lines

    lines[-2] = " ".join(prev_words[:-1])
    lines[-1] = prev_words[-1] + " " + lines[-1]

    return balance_lines_upward(lines, len(lines) - 2)


def balance_lines_upward(lines: Sequence[str], from_index: int) -> list[str]:
    """
    Cascade word moves upward starting at a shortened line.

    Walks from from_index towards the top. At each step the line above
    gives up its last word when its last two words would both start at or
    past the end of the current line. Lengths are UTF-8 byte counts, not
    pixels, so accented letters and typographic punctuation count as
    more than one. The walk stops at the first line that doesn't need a move;
    lines above with a single word are skipped.

    Args:
        lines: Lines, top to bottom
        from_index: Index of the line that was just shortened

    Returns:
        New list of lines
    """
    lines = list(lines)

    for idx in range(from_index, 0, -1):
        current_line = lines[idx]
        above_words = lines[idx - 1].split()

        if len(above_words) < 2:
            continue

        second_to_last_start = _encoded_len(" ".join(above_words[:-2]))
        if len(above_words) > 2:
            second_to_last_start += 1  # separating space

        if second_to_last_start >= _encoded_len(current_line):
            lines[idx - 1] = " ".join(above_words[:-1])
            lines[idx] = above_words[-1] + " " + current_line
        else:
            break

    return lines


def _encoded_len(text: str) -> int:
    """Length of text in UTF-8 bytes."""
    return len(text.encode("utf-8"))
