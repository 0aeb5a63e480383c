"""Eased movement of an object toward a target position."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from patience.geom import Pos

DEFAULT_VELOCITY = 0.3
FINISH_EPSILON = 0.01


@dataclass
class Animation:
    """Moves something from ``starting_pos`` to ``target_pos``, slowing as it nears.

    ``current_pos`` reports where the moved object is now, ``move_by`` shifts it
    by an offset, and ``on_finish`` runs once the target has been reached.
    """

    starting_pos: Pos
    target_pos: Pos
    current_pos: Callable[[], Pos]
    move_by: Callable[[Pos], None]
    on_finish: Callable[[], None]
    base_velocity: float = DEFAULT_VELOCITY
    _velocity: float = field(default=0.0, init=False, repr=False)

    def unit_delta(self) -> Pos:
        """Return the step to take this frame.

        The step is the full travel scaled by the remaining fraction of the
        journey times the base velocity, so movement decelerates smoothly.
        """
        full = self.target_pos - self.starting_pos
        remaining = self.target_pos - self.current_pos()

        if full.x != 0:
            self._velocity = (remaining.x / full.x) * self.base_velocity
        elif full.y != 0:
            self._velocity = (remaining.y / full.y) * self.base_velocity
        else:
            self._velocity = 0.0

        return Pos(full.x * self._velocity, full.y * self._velocity)

    def update(self) -> None:
        """Advance the animated object by one step."""
        self.move_by(self.unit_delta())

    def is_finished(self) -> bool:
        """True once the object is close enough to the target."""
        return self.current_pos().almost_eq(self.target_pos, FINISH_EPSILON)

    def finish(self) -> None:
        """Run the completion action."""
        self.on_finish()