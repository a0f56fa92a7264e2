"""
Join wrapped lines while keeping line numbers.

A line whose trimmed text ends with the wrap marker continues on the next one.
Instead of writing

    {{- range $k, $v := zip (keys "Rat" "Pig" "Monkey" "Horse") (values $.HR $.TeamLead $.Marketing $.Dev)}}
    {{- add $team.Members $k $v}}

a template can say

    {{- range $k, $v := zip (keys "Rat" "Pig" "Monkey" "Horse") \\
            (values $.HR $.TeamLead $.Marketing $.Dev)}}
    {{- add $team.Members $k $v}}

Unwrapping puts the joined text on the first line of the run and leaves the
absorbed lines empty, so every line after the run keeps its original number.
"""

from typing import List

from lineunwrap.config.unwrapconfig import LEADING_TRIM_CHARS, TRAILING_TRIM_CHARS, WRAP_MARKER


def _trim_marker(line: str, marker: str) -> str:
    # Only one marker occurrence is removed
    if line.endswith(marker):
        return line[:-len(marker)]
    return line


def unwrap_lines(lines: List[str], marker: str = WRAP_MARKER) -> List[str]:
    """Unwrap ``lines`` in place and return the same list.

    The list never changes length: a run of k marked lines plus its
    terminating line becomes one joined line followed by k empty strings.
    A marker on the last line is dropped.
    """
    if not marker:
        raise ValueError("wrap marker must be a non-empty string")

    last_index = len(lines) - 1
    for n in range(len(lines)):
        lines[n] = lines[n].rstrip(TRAILING_TRIM_CHARS)
        if not lines[n].endswith(marker):
            continue

        if n == last_index:  # trim marker from last line
            lines[n] = _trim_marker(lines[n], marker)
            return lines

        first = last = n
        while lines[last].endswith(marker) and last < last_index:
            last += 1
            lines[last] = lines[last].rstrip(TRAILING_TRIM_CHARS)

        parts = [_trim_marker(lines[first], marker)]
        for i in range(first + 1, last + 1):
            parts.append(_trim_marker(lines[i], marker).lstrip(LEADING_TRIM_CHARS))
            lines[i] = ""
        lines[first] = "".join(parts)

    return lines


def unwrap_lines_in_string(text: str, marker: str = WRAP_MARKER) -> str:
    """Split ``text`` on newlines, unwrap it and join it back."""
    return "\n".join(unwrap_lines(text.split("\n"), marker))
