"""Pure game mechanics: the shockwave animation and the slider's value."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable


def shockwave_scale(
    time_ticks: float,
    time_span_light: float,
    time_span_shockwave: float,
    min_scale: float,
    max_scale: float,
) -> float:
    """Return the shockwave scale at a time, interpolated geometrically from min to max."""
    total = time_span_light + time_span_shockwave
    exponent = (
        (total - time_ticks) * math.log2(min_scale) + time_ticks * math.log2(max_scale)
    ) / total
    return 2.0 ** exponent


def light_phase(time_ticks: float, time_span_light: float, frame_count: int) -> int:
    """Return the index of the light frame shown at a time."""
    return math.floor(time_ticks / time_span_light * frame_count)


@dataclass
class SliderModel:
    """A horizontal slider whose knob runs from ``x`` to ``x + width``.

    The value is in [0, 1]; the knob starts at the right end as drawn.
    """

    x: float
    width: float
    on_value_changed: Callable[[float], None] | None = None
    value: float = 0.0
    down: bool = False
    position_x: float = field(init=False)

    minimum = 0.0
    maximum = 1.0

    def __post_init__(self) -> None:
        self.position_x = self.x + self.width

    @property
    def end1_x(self) -> float:
        return self.x

    @property
    def end2_x(self) -> float:
        return self.x + self.width

    def set_value(self, value: float) -> None:
        """Set the value, move the knob and notify the callback."""
        self.value = value
        self.position_x = value * (self.end2_x - self.end1_x) + self.end1_x
        if self.on_value_changed is not None:
            self.on_value_changed(value)

    def drag_to(self, mx: float) -> None:
        """Follow the mouse while held down, if it is between the two ends."""
        if self.down and self.end1_x <= mx <= self.end2_x:
            self.set_value((mx - self.end1_x) / (self.end2_x - self.end1_x))