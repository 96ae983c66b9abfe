"""Parse fixed-spot expressions typed into the participant form."""

import re

from raffle_assistant.types import SpotParse

_SEPARATORS = re.compile(r"[\s,]+")
_RANGE = re.compile(r"^(\d+)-(\d+)$")
_NUMBER = re.compile(r"^\d+$")


def _bounded_value(digits: str, total_spots: int) -> tuple[int, str]:
    """Value of an all-digit string, capped just above ``total_spots``.

    Numbers with more digits than ``total_spots`` are never converted, so
    arbitrarily long input cannot hit the interpreter's int conversion limit.
    Returns the (possibly capped) value and the digits without leading zeros.
    """
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(total_spots)):
        return total_spots + 1, significant
    return int(significant), significant


def parse_spot_expression(text: str, total_spots: int) -> SpotParse:
    """Parse a comma/space separated list of spots and inclusive ranges.

    Args:
        text: Expression such as ``"1, 3 5-8"``. Range ends may be given in
            either order (``"8-5"`` equals ``"5-8"``).
        total_spots: Highest valid spot number.

    Returns:
        SpotParse with the deduplicated ascending spots in [1, total_spots],
        the tokens that could not be parsed, and the parsed values that fell
        outside the valid range.
    """
    spots: set[int] = set()
    skipped: list[str] = []
    out_of_range: set[str] = set()

    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue

        match = _RANGE.match(token)
        if match:
            (start, start_text), (end, end_text) = sorted(
                _bounded_value(g, total_spots) for g in match.groups()
            )
            # Clip before expanding so "1-999999999" stays cheap
            spots.update(range(max(start, 1), min(end, total_spots) + 1))
            for value, value_text in ((start, start_text), (end, end_text)):
                if not 1 <= value <= total_spots:
                    out_of_range.add(value_text)
            continue

        if _NUMBER.match(token):
            value, value_text = _bounded_value(token, total_spots)
            if 1 <= value <= total_spots:
                spots.add(value)
            else:
                out_of_range.add(value_text)
            continue

        skipped.append(token)

    return SpotParse(
        spots=tuple(sorted(spots)),
        skipped=tuple(skipped),
        out_of_range=tuple(sorted(out_of_range, key=lambda s: (len(s), s))),
    )


def parse_spot_list(text: str, total_spots: int) -> tuple[int, ...]:
    """Return only the valid spots from a fixed-spot expression."""
    return parse_spot_expression(text, total_spots).spots


def format_spot_list(spots: tuple[int, ...] | list[int]) -> str:
    """Render spots for display, e.g. ``(1, 2, 5)`` -> ``"1, 2, 5"``."""
    return ", ".join(str(s) for s in spots)
