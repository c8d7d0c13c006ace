"""The "3, 2, 1, GO" countdown shown over the board before a game starts.

Each label pops in by growing and fading in over its first third of a
second. It then holds, and fades out again between about 0.67 and 0.83
seconds after it appeared.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from marblerail.layout import Margin, Vector, countdown_position

COUNTDOWN_START = 6.0
COUNTDOWN_END = 10.0

_LABEL_TIMES: tuple[tuple[float, str], ...] = ((9.0, "GO"), (8.0, "1"), (7.0, "2"))
_FIRST_LABEL = "3"
_GROW_FREQUENCY = 9.42
_GROW_PHASE = 0.167
_GROW_END = 0.33
_FADE_START = 0.666
_FADE_END = 0.833
_FADE_FREQUENCY = 18.85
_FADE_PHASE = 0.083


def adjusted_countdown_margin(margin: Margin, viewport: Vector) -> float:
    """How far each edge of the countdown box moves at the peak of its growth.

    The value is negative: adding it to the padding enlarges the box.
    """
    size = viewport[1] - (margin.top + margin.bottom)
    return ((size - 1.42 * size) / 2) / 2


def grow_countdown_margin(margin: Margin, adjusted: float, clock: float) -> Margin:
    """Padding of the countdown box ``clock`` seconds into a label's pop-in."""
    step = adjusted * math.sin(_GROW_FREQUENCY * (clock - _GROW_PHASE)) + adjusted
    return Margin(
        left=margin.left + step,
        top=margin.top + step,
        right=margin.right + step,
        bottom=margin.bottom + step,
    )


@dataclass(frozen=True)
class CountdownFrame:
    """What the countdown looks like after an update."""

    text: str
    opacity: float
    font_size: float
    margin: Margin
    started: bool


@dataclass
class Countdown:
    """Timeline of the pre-game countdown; ``started`` turns true after ten seconds."""

    viewport: Vector
    base_font_size: float = field(init=False)
    font_growth: float = field(init=False)
    base_margin: Margin = field(init=False)
    margin_growth: float = field(init=False)
    elapsed: float = field(init=False, default=0.0)
    clock: float = field(init=False, default=0.0)
    text: str = field(init=False, default="0")
    opacity: float = field(init=False, default=0.0)
    font_size: float = field(init=False)
    margin: Margin = field(init=False)
    started: bool = field(init=False, default=False)
    _shown: set[str] = field(init=False, default_factory=set, repr=False)

    def __init__(self, viewport: Vector) -> None:
        width, height = viewport
        self.viewport = (float(width), float(height))
        self.base_font_size = 0.0866 * self.viewport[1]
        self.font_growth = (1.155 * self.base_font_size - self.base_font_size) / 2
        self.base_margin = countdown_position(self.viewport)
        self.margin_growth = adjusted_countdown_margin(self.base_margin, self.viewport)
        self.elapsed = 0.0
        self.clock = 0.0
        self.text = "0"
        self.opacity = 0.0
        self.font_size = self.base_font_size
        self.margin = self.base_margin
        self.started = False
        self._shown = set()

    @property
    def shadow_offset(self) -> Vector:
        """Offset of the text shadow, scaled to the viewport height."""
        offset = self.viewport[1] * 0.004
        return offset, offset

    @property
    def frame(self) -> CountdownFrame:
        """The current appearance."""
        return CountdownFrame(
            text=self.text,
            opacity=self.opacity,
            font_size=self.font_size,
            margin=self.margin,
            started=self.started,
        )

    def _show(self, label: str) -> None:
        if label in self._shown:
            return
        self._shown.add(label)
        self.text = label
        self.clock = 0.0
        self.opacity = 0.0
        self.font_size = self.base_font_size
        self.margin = self.base_margin

    def update(self, delta: float) -> CountdownFrame:
        """Advance by ``delta`` seconds and return the new appearance."""
        if self.started:
            return self.frame

        self.elapsed += delta
        if self.elapsed <= COUNTDOWN_START:
            return self.frame

        if self.elapsed > COUNTDOWN_END:
            self.started = True
        else:
            for threshold, label in _LABEL_TIMES:
                if self.elapsed > threshold:
                    self._show(label)
                    break
        self._show(_FIRST_LABEL)

        self.clock += delta
        if self.clock < _GROW_END:
            wave = math.sin(_GROW_FREQUENCY * (self.clock - _GROW_PHASE))
            self.margin = grow_countdown_margin(
                self.base_margin, self.margin_growth, self.clock
            )
            self.opacity = 0.5 * wave + 0.5
            self.font_size = self.base_font_size + self.font_growth * wave + self.font_growth
        elif self.clock > _FADE_END:
            pass
        elif self.clock > _FADE_START:
            wave = math.sin(_FADE_FREQUENCY * ((self.clock - _FADE_START) - _FADE_PHASE))
            self.opacity = 1 - (0.5 * wave + 0.5)

        return self.frame