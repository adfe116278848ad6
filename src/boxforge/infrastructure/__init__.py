"""Infrastructure layer - output formatting and export."""

from .formatters import (
    FoldTableFormatter,
    JsonExporter,
    NetOutlineFormatter,
    PanelLayoutFormatter,
    StructuralReportFormatter,
)

__all__ = [
    "FoldTableFormatter",
    "JsonExporter",
    "NetOutlineFormatter",
    "PanelLayoutFormatter",
    "StructuralReportFormatter",
]
