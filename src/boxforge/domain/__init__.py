"""Domain layer - box geometry, kinematics and strength."""

from .materials import (
    GLUE_TAB_WIDTH,
    MATERIAL_DATA,
    UnknownFluteError,
    get_material,
    parse_flute,
)
from .services import (
    FoldPlayback,
    NetOutline,
    PanelLayoutCalculator,
    StructuralAnalysisService,
    analyze,
    build_net_outline,
    compute_angles,
    compute_layout,
)
from .units import IN_TO_MM, LBF_TO_N, LBS_TO_KG, convert_dimensions
from .value_objects import (
    BoxDimensions,
    FluteType,
    MaterialProperties,
    PanelAngles,
    PanelLayout,
    StructuralAnalysis,
    UnitSystem,
)

__all__ = [
    "BoxDimensions",
    "FluteType",
    "FoldPlayback",
    "GLUE_TAB_WIDTH",
    "IN_TO_MM",
    "LBF_TO_N",
    "LBS_TO_KG",
    "MATERIAL_DATA",
    "MaterialProperties",
    "NetOutline",
    "PanelAngles",
    "PanelLayout",
    "PanelLayoutCalculator",
    "StructuralAnalysis",
    "StructuralAnalysisService",
    "UnitSystem",
    "UnknownFluteError",
    "analyze",
    "build_net_outline",
    "compute_angles",
    "compute_layout",
    "convert_dimensions",
    "get_material",
    "parse_flute",
]
