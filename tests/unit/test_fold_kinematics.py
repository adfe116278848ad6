"""Unit tests for the assembly fold choreography and playback state."""

from __future__ import annotations

import math

import pytest

from boxforge.domain import FoldPlayback, PanelAngles, compute_angles
from boxforge.domain.services import FOLD_SEQUENCE, active_folds, sample_fold_sequence
from boxforge.domain.services.fold_kinematics import (
    HALF_PI,
    MANUAL_STEP,
    PLAYBACK_STEP,
    FoldStep,
    clamp_progress,
)


class TestFoldSequence:
    """Tests for the fold timing table."""

    def test_order_and_timing(self) -> None:
        assert [(s.name, s.start, s.rate) for s in FOLD_SEQUENCE] == [
            ("side_fold_a", 0.0, 4.2),
            ("side_fold_b", 0.2, 4.2),
            ("side_fold_c", 0.4, 4.2),
            ("glue_tab", 0.6, 4.2),
            ("top_bottom_flaps", 0.8, 5.0),
        ]

    def test_last_step_ends_at_one(self) -> None:
        assert FOLD_SEQUENCE[-1].end == pytest.approx(1.0)

    def test_fraction_is_clamped(self) -> None:
        step = FoldStep("glue_tab", 0.6, 4.2)
        assert step.fraction(0.0) == 0.0
        assert step.fraction(0.7) == pytest.approx(0.42)
        assert step.fraction(0.95) == 1.0


class TestComputeAngles:
    """Tests for progress to angle mapping."""

    def test_flat_at_zero(self) -> None:
        assert compute_angles(0.0) == PanelAngles(0.0, 0.0, 0.0, 0.0, 0.0)

    def test_closed_at_one(self) -> None:
        """Every fold lands exactly on pi/2."""
        angles = compute_angles(1.0)
        assert all(a == HALF_PI for a in angles.as_tuple())

    def test_midpoint(self) -> None:
        angles = compute_angles(0.5)
        assert angles.side_fold_a == HALF_PI
        assert angles.side_fold_b == HALF_PI
        assert angles.side_fold_c == pytest.approx(0.42 * HALF_PI)
        assert angles.glue_tab == 0.0
        assert angles.top_bottom_flaps == 0.0

    @pytest.mark.parametrize("progress,expected", [(-0.5, 0.0), (2.0, 1.0)])
    def test_out_of_range_is_clamped(self, progress: float, expected: float) -> None:
        assert compute_angles(progress) == compute_angles(expected)

    def test_angles_stay_in_range(self) -> None:
        for _, angles in sample_fold_sequence(101):
            for angle in angles.as_tuple():
                assert 0.0 <= angle <= HALF_PI

    def test_monotonic_in_progress(self) -> None:
        """No fold ever opens back up as progress increases."""
        previous = compute_angles(0.0).as_tuple()
        for i in range(1, 201):
            current = compute_angles(i / 200).as_tuple()
            assert all(c >= p for c, p in zip(current, previous))
            previous = current

    def test_deterministic(self) -> None:
        assert compute_angles(0.37) == compute_angles(0.37)

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError, match="NaN"):
            compute_angles(math.nan)

    def test_clamp_progress(self) -> None:
        assert clamp_progress(-1) == 0.0
        assert clamp_progress(0.25) == 0.25
        assert clamp_progress(7) == 1.0


class TestActiveFolds:
    """Tests for identifying folds in motion."""

    @pytest.mark.parametrize(
        "progress,expected",
        [
            (0.0, []),
            (0.1, ["side_fold_a"]),
            (0.22, ["side_fold_a", "side_fold_b"]),
            (0.5, ["side_fold_c"]),
            (0.7, ["glue_tab"]),
            (0.9, ["top_bottom_flaps"]),
            (1.0, []),
        ],
    )
    def test_active_folds(self, progress: float, expected: list[str]) -> None:
        assert active_folds(progress) == expected


class TestSampleFoldSequence:
    """Tests for evenly spaced sampling."""

    def test_includes_both_ends(self) -> None:
        samples = sample_fold_sequence(5)
        assert [p for p, _ in samples] == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert samples[0][1] == compute_angles(0.0)
        assert samples[-1][1] == compute_angles(1.0)

    def test_too_few_frames(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            sample_fold_sequence(1)


class TestFoldPlayback:
    """Tests for the caller-owned playback state."""

    def test_defaults(self) -> None:
        playback = FoldPlayback()
        assert playback.progress == 0.0
        assert playback.is_playing is False
        assert playback.playback_step == PLAYBACK_STEP
        assert playback.manual_step == MANUAL_STEP

    def test_tick_while_paused_does_nothing(self) -> None:
        playback = FoldPlayback(progress=0.3)
        assert playback.tick() == 0.3

    def test_tick_advances(self) -> None:
        playback = FoldPlayback()
        playback.play()
        assert playback.tick() == pytest.approx(0.005)

    def test_play_to_completion_stops(self) -> None:
        """Playing from flat reaches exactly 1.0 and stops on its own."""
        playback = FoldPlayback()
        playback.play()
        ticks = 0
        while playback.is_playing and ticks < 500:
            playback.tick()
            ticks += 1

        assert ticks in (200, 201)
        assert playback.progress == 1.0
        assert playback.is_playing is False
        assert playback.is_complete
        assert playback.angles == compute_angles(1.0)

    def test_play_at_end_stops_immediately(self) -> None:
        playback = FoldPlayback(progress=1.0)
        playback.play()
        assert playback.tick() == 1.0
        assert playback.is_playing is False

    def test_step_forward_clamps_and_cancels(self) -> None:
        playback = FoldPlayback(progress=0.98)
        playback.play()
        assert playback.step_forward() == 1.0
        assert playback.is_playing is False

    def test_step_back_clamps_and_cancels(self) -> None:
        playback = FoldPlayback(progress=0.02)
        playback.play()
        assert playback.step_back() == 0.0
        assert playback.is_playing is False

    def test_toggle(self) -> None:
        playback = FoldPlayback()
        playback.toggle()
        assert playback.is_playing
        playback.toggle()
        assert not playback.is_playing

    def test_seek_clamps(self) -> None:
        playback = FoldPlayback()
        assert playback.seek(1.7) == 1.0
        assert playback.seek(-3) == 0.0

    def test_reset(self) -> None:
        playback = FoldPlayback(progress=0.6, is_playing=True)
        playback.reset()
        assert playback.progress == 0.0
        assert playback.is_playing is False

    def test_initial_progress_is_clamped(self) -> None:
        assert FoldPlayback(progress=4.0).progress == 1.0

    def test_non_positive_step_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            FoldPlayback(playback_step=0.0)
