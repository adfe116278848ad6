"""Convert validated configuration models into application DTOs."""

from boxforge.application.config.schema import BoxConfiguration
from boxforge.application.dtos import BoxInput
from boxforge.domain import FoldPlayback


def config_to_box_input(config: BoxConfiguration) -> BoxInput:
    """Build the BoxInput for GenerateBoxDesignCommand."""
    return BoxInput(
        length=config.box.length,
        width=config.box.width,
        height=config.box.height,
        flute=config.box.flute.name,
        units=config.units.value,
    )


def config_to_playback(config: BoxConfiguration) -> FoldPlayback:
    """Fresh playback state using the configured step sizes."""
    return FoldPlayback(
        playback_step=config.animation.playback_step,
        manual_step=config.animation.manual_step,
    )
