"""Application layer - use cases and orchestration."""

from .commands import FoldAnglesCommand, GenerateBoxDesignCommand
from .dtos import BoxDesignOutput, BoxInput

__all__ = [
    "BoxDesignOutput",
    "BoxInput",
    "FoldAnglesCommand",
    "GenerateBoxDesignCommand",
]
