"""Step reassembly: regroup flattened panel lines into timestamped steps.

WHY: A directions panel shows each step as a stack of small rows: the
departure time on its own row, then the station, the mode icon label,
the line name, the fare. Flattened to text, those rows lose their
grouping. Times are the one reliable anchor: the panel always renders
them as their own row at the head of a step.

HOW: A single left-to-right pass with one step buffer. A timestamp line
flushes whatever the buffer holds and opens a new step with the time as
its first element. Every other line is classified and appended: mode
words, fares, and arrival notes wrapped in brackets; ID rows dropped;
everything else verbatim. The buffer is flushed once more at the end.

RULES:
- Timestamp line + non-empty buffer → flush, then start buffer with the time
- Timestamp line + empty buffer → start buffer with the time (no empty step)
- Mode tag / fare / arrival → "[line]"
- "ID:" lines → discarded, never emitted
- Other lines → appended verbatim
- Leading content before the first timestamp is kept as its own step
- A flushed step is the buffer joined with single spaces
- Step order equals input order
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import List, Optional

from route_copier.core.classify import (
    is_fare_or_arrival,
    is_identifier_noise,
    is_mode_tag,
    is_timestamp,
)
from route_copier.core.options import RouteOptions


class StepState(enum.Enum):
    """Whether a step buffer is currently open."""

    NO_STEP_OPEN = "no_step_open"
    STEP_OPEN = "step_open"


def bracket(line: str) -> str:
    """Wrap an annotation line so it reads apart from place names."""
    return "[" + line + "]"


def classify_content(line: str, options: RouteOptions) -> Optional[str]:
    """Return the text to append for a non-timestamp line, or None to drop it.

    Annotation checks run first: an "ID:" line that also carries a
    currency or arrival marker is kept as an annotation.
    """
    if is_mode_tag(line, options.mode_words) or is_fare_or_arrival(
        line, options.currency_markers, options.arrival_markers
    ):
        return bracket(line)
    if is_identifier_noise(line):
        return None
    return line


def reassemble(
    lines: Sequence[str],
    options: Optional[RouteOptions] = None,
) -> List[str]:
    """Re-segment trimmed lines into one formatted string per step.

    Args:
        lines: Ordered, whitespace-normalized lines (already trimmed).
        options: Classification sets; defaults to RouteOptions().

    Returns:
        Ordered list of formatted steps. Empty when every line was noise
        or the input was empty.
    """
    if options is None:
        options = RouteOptions()

    steps: List[str] = []
    buffer: List[str] = []
    state = StepState.NO_STEP_OPEN

    def _flush() -> None:
        """Emit the open step, if any."""
        nonlocal buffer, state
        if buffer:
            steps.append(" ".join(buffer))
        buffer = []
        state = StepState.NO_STEP_OPEN

    for line in lines:
        if is_timestamp(line):
            _flush()
            buffer.append(line)
            state = StepState.STEP_OPEN
            continue

        piece = classify_content(line, options)
        if piece is None:
            continue
        buffer.append(piece)
        state = StepState.STEP_OPEN

    if state is StepState.STEP_OPEN:
        _flush()

    return steps
