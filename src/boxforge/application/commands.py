"""Application commands (use cases) for box design."""

from __future__ import annotations

import logging

from boxforge.domain import (
    FoldPlayback,
    NetOutline,
    PanelAngles,
    PanelLayout,
    PanelLayoutCalculator,
    StructuralAnalysisService,
    build_net_outline,
    compute_angles,
)
from boxforge.domain.services import sample_fold_sequence

from .dtos import BoxDesignOutput, BoxInput

logger = logging.getLogger(__name__)


class GenerateBoxDesignCommand:
    """Command to produce the layout, net outline and strength report."""

    def __init__(
        self,
        layout_calculator: PanelLayoutCalculator | None = None,
        structural_service: StructuralAnalysisService | None = None,
    ) -> None:
        self.layout_calculator = layout_calculator or PanelLayoutCalculator()
        self.structural_service = structural_service or StructuralAnalysisService()

    def execute(self, box_input: BoxInput) -> BoxDesignOutput:
        """Execute the design command.

        Invalid input is reported through ``errors`` on the output rather
        than raised.
        """
        errors = box_input.validate()
        if errors:
            logger.warning(f"Box input rejected: {'; '.join(errors)}")
            return BoxDesignOutput(
                dimensions=None,
                units=None,
                layout=None,
                analysis=None,
                outline=None,
                errors=errors,
            )

        dimensions = box_input.to_dimensions()
        units = box_input.unit_system
        layout: PanelLayout = self.layout_calculator.compute_layout(dimensions, units)
        outline: NetOutline = build_net_outline(layout)
        analysis = self.structural_service.analyze(dimensions, units)

        logger.debug(
            f"Generated {dimensions.flute.value} design: "
            f"BCT {analysis.bct_value:.1f} {analysis.force_unit}"
        )
        return BoxDesignOutput(
            dimensions=dimensions,
            units=units,
            layout=layout,
            analysis=analysis,
            outline=outline,
        )


class FoldAnglesCommand:
    """Command to evaluate the fold choreography."""

    def at(self, progress: float) -> PanelAngles:
        """Angles at one progress value (clamped)."""
        return compute_angles(progress)

    def frames(self, count: int) -> list[tuple[float, PanelAngles]]:
        """Evenly sampled angles from flat to closed."""
        return sample_fold_sequence(count)

    def steps(self, playback: FoldPlayback) -> list[tuple[float, PanelAngles]]:
        """Angles at each manual step from the playback's position to closed.

        Stepping cancels playback, as it does interactively.
        """
        samples = [(playback.progress, playback.angles)]
        while not playback.is_complete:
            playback.step_forward()
            samples.append((playback.progress, playback.angles))
        return samples
