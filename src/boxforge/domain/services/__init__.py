"""Domain services for box layout, folding and strength analysis."""

from .fold_kinematics import (
    FOLD_SEQUENCE,
    FoldPlayback,
    FoldStep,
    active_folds,
    compute_angles,
    sample_fold_sequence,
)
from .net_outline import (
    LineType,
    NetLine,
    NetOutline,
    NetOutlineBuilder,
    NetPanel,
    NetRegion,
    build_net_outline,
)
from .panel_layout import (
    PanelLayoutCalculator,
    calculate_fold_allowance,
    compute_layout,
)
from .structural import (
    SAFETY_FACTOR,
    StructuralAnalysisService,
    analyze,
)

__all__ = [
    "FOLD_SEQUENCE",
    "FoldPlayback",
    "FoldStep",
    "LineType",
    "NetLine",
    "NetOutline",
    "NetOutlineBuilder",
    "NetPanel",
    "NetRegion",
    "PanelLayoutCalculator",
    "SAFETY_FACTOR",
    "StructuralAnalysisService",
    "active_folds",
    "analyze",
    "build_net_outline",
    "calculate_fold_allowance",
    "compute_angles",
    "compute_layout",
    "sample_fold_sequence",
]
