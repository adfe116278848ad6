"""Assembly progress to per-panel fold angles.

A single progress scalar in [0, 1] drives five fold events in a fixed
order: the three side folds, then the glue tab, then the top and bottom
flaps. Each event is a clamped linear ramp from 0 to pi/2, so every angle
is a pure, non-decreasing function of progress.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from boxforge.domain.value_objects import PanelAngles

HALF_PI: float = math.pi / 2

# Progress added per playback tick, and per manual step
PLAYBACK_STEP: float = 0.005
MANUAL_STEP: float = 0.05


@dataclass(frozen=True)
class FoldStep:
    """One fold event of the choreography.

    Attributes:
        name: PanelAngles field driven by this step.
        start: Progress at which the ramp begins.
        rate: Ramp slope; the fold completes 1/rate after start.
    """

    name: str
    start: float
    rate: float

    @property
    def end(self) -> float:
        return self.start + 1.0 / self.rate

    def fraction(self, progress: float) -> float:
        """Completed fraction of this fold at the given progress."""
        if progress >= self.end:
            return 1.0
        return min(max((progress - self.start) * self.rate, 0.0), 1.0)

    def angle(self, progress: float) -> float:
        return self.fraction(progress) * HALF_PI


FOLD_SEQUENCE: tuple[FoldStep, ...] = (
    FoldStep("side_fold_a", 0.0, 4.2),
    FoldStep("side_fold_b", 0.2, 4.2),
    FoldStep("side_fold_c", 0.4, 4.2),
    FoldStep("glue_tab", 0.6, 4.2),
    FoldStep("top_bottom_flaps", 0.8, 5.0),
)


def clamp_progress(progress: float) -> float:
    """Clamp progress into [0, 1].

    Raises:
        ValueError: If progress is NaN.
    """
    if math.isnan(progress):
        raise ValueError("Fold progress must be a number, got NaN")
    return min(max(float(progress), 0.0), 1.0)


def compute_angles(
    progress: float, sequence: tuple[FoldStep, ...] = FOLD_SEQUENCE
) -> PanelAngles:
    """Map assembly progress to the five panel angles.

    Out-of-range progress is clamped. The same progress always yields the
    same angles.
    """
    p = clamp_progress(progress)
    return PanelAngles(**{step.name: step.angle(p) for step in sequence})


def active_folds(
    progress: float, sequence: tuple[FoldStep, ...] = FOLD_SEQUENCE
) -> list[str]:
    """Names of folds that are partway through their ramp."""
    p = clamp_progress(progress)
    return [step.name for step in sequence if 0.0 < step.fraction(p) < 1.0]


def sample_fold_sequence(frames: int) -> list[tuple[float, PanelAngles]]:
    """Evenly spaced (progress, angles) pairs from flat to closed.

    Args:
        frames: Number of samples, at least 2 (both ends included).
    """
    if frames < 2:
        raise ValueError("frames must be at least 2")
    samples = []
    for i in range(frames):
        progress = i / (frames - 1)
        samples.append((progress, compute_angles(progress)))
    return samples


@dataclass
class FoldPlayback:
    """Caller-owned playback state for the assembly animation.

    The timer lives outside this class; it calls tick() on its own
    cadence. Angles are never cached, always recomputed from progress.
    """

    progress: float = 0.0
    is_playing: bool = False
    playback_step: float = PLAYBACK_STEP
    manual_step: float = MANUAL_STEP

    def __post_init__(self) -> None:
        self.progress = clamp_progress(self.progress)
        if self.playback_step <= 0 or self.manual_step <= 0:
            raise ValueError("Step sizes must be positive")

    @property
    def angles(self) -> PanelAngles:
        return compute_angles(self.progress)

    @property
    def is_complete(self) -> bool:
        return self.progress >= 1.0

    def play(self) -> None:
        self.is_playing = True

    def pause(self) -> None:
        self.is_playing = False

    def toggle(self) -> None:
        self.is_playing = not self.is_playing

    def tick(self) -> float:
        """Advance one playback step; stops playing on reaching 1."""
        if not self.is_playing:
            return self.progress
        if self.progress >= 1.0:
            self.progress = 1.0
            self.is_playing = False
            return self.progress
        self.progress = min(1.0, self.progress + self.playback_step)
        if self.progress >= 1.0:
            self.is_playing = False
        return self.progress

    def step_forward(self) -> float:
        """Manual step forward; always cancels playback."""
        self.is_playing = False
        self.progress = min(1.0, self.progress + self.manual_step)
        return self.progress

    def step_back(self) -> float:
        """Manual step back; always cancels playback."""
        self.is_playing = False
        self.progress = max(0.0, self.progress - self.manual_step)
        return self.progress

    def seek(self, progress: float) -> float:
        """Jump to a progress value, clamped into range."""
        self.progress = clamp_progress(progress)
        return self.progress

    def reset(self) -> None:
        self.progress = 0.0
        self.is_playing = False


__all__ = [
    "FOLD_SEQUENCE",
    "FoldPlayback",
    "FoldStep",
    "HALF_PI",
    "MANUAL_STEP",
    "PLAYBACK_STEP",
    "active_folds",
    "clamp_progress",
    "compute_angles",
    "sample_fold_sequence",
]
