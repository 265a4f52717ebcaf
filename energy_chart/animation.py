"""
Left-to-right reveal animation for the Energy Chart lines.

Each line is stroked with a single dash as long as the path, followed
by an equally long gap.  The dash offset starts at the path length
(line hidden) and moves linearly to zero (line fully drawn).  The
animation is cosmetic: the final frame equals the static chart.
"""

from dataclasses import dataclass

from .constants import REVEAL_DURATION_MS, REVEAL_EASING


@dataclass(frozen=True)
class RevealAnimation:
    duration_ms: int = REVEAL_DURATION_MS
    easing: str = REVEAL_EASING

    def __post_init__(self):
        if self.easing != "linear":
            raise ValueError(f"unsupported easing {self.easing!r}")

    def progress(self, elapsed_ms: float) -> float:
        """Fraction of the line drawn after *elapsed_ms*, in ``[0, 1]``."""
        if elapsed_ms <= 0:
            return 0.0
        if elapsed_ms >= self.duration_ms:
            return 1.0
        return elapsed_ms / self.duration_ms

    def dash_offset(self, elapsed_ms: float, length: float) -> float:
        return length * (1.0 - self.progress(elapsed_ms))

    @staticmethod
    def dash_array(length: float) -> str:
        """Dash pattern string: one dash and one gap, both *length* long."""
        return f"{length:.3f} {length:.3f}"

    def is_finished(self, elapsed_ms: float) -> bool:
        return elapsed_ms >= self.duration_ms
