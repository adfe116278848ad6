"""Text and JSON output for box designs."""

from __future__ import annotations

import json
import math
from typing import Any

from boxforge.application.dtos import BoxDesignOutput
from boxforge.domain import NetOutline, PanelAngles, PanelLayout, StructuralAnalysis
from boxforge.domain.services.structural import STACKING_DISCLAIMER


class PanelLayoutFormatter:
    """Formats the panel dimension table."""

    def format(self, layout: PanelLayout | None) -> str:
        if layout is None:
            return "No layout to display."

        unit = layout.unit_suffix
        rows = [
            ("Panel A / C (long)", layout.panel_width_long, layout.panel_height, 2),
            ("Panel B / D (short)", layout.panel_width_short, layout.panel_height, 2),
            ("Flap (top/bottom)", layout.panel_width_long, layout.flap_height, 4),
            ("Flap (top/bottom)", layout.panel_width_short, layout.flap_height, 4),
            ("Glue tab", layout.glue_tab_width, layout.panel_height, 1),
        ]
        lines = [
            "PANEL LAYOUT",
            "=" * 60,
            f"{'Panel':<22} {'Width':<12} {'Height':<12} {'Qty'}",
            "-" * 60,
        ]
        for label, width, height, qty in rows:
            lines.append(f"{label:<22} {width:<12.4f} {height:<12.4f} {qty}")
        lines.append("-" * 60)
        lines.append(f"Board thickness:   {layout.thickness:.4f} {unit}")
        lines.append(f"Fold allowance:    {layout.fold_allowance:.4f} {unit}")
        lines.append(f"Slot width:        {layout.slot_width:.4f} {unit}")
        lines.append(
            f"Blank size:        {layout.total_width:.3f} x "
            f"{layout.total_height:.3f} {unit}"
        )
        return "\n".join(lines)


class StructuralReportFormatter:
    """Formats the compression and stacking summary."""

    def format(self, analysis: StructuralAnalysis | None) -> str:
        if analysis is None:
            return "No structural analysis to display."

        status = "OK" if analysis.is_safe else "CHECK"
        lines = [
            "STRUCTURAL ANALYSIS",
            "=" * 60,
            f"BCT value:       {analysis.bct_value:.1f} {analysis.force_unit}",
            f"Max safe load:   {analysis.max_safe_load:.1f} {analysis.force_unit}",
            f"Max weight:      {analysis.max_safe_mass:.0f} {analysis.mass_unit}",
            f"Safety factor:   {analysis.safety_factor:g}",
            f"Status:          {status}",
            "",
            STACKING_DISCLAIMER,
        ]
        return "\n".join(lines)


class FoldTableFormatter:
    """Formats fold angles in degrees, one row per progress sample."""

    HEADERS = ("Side A", "Side B", "Side C", "Glue", "Flaps")

    def format(self, samples: list[tuple[float, PanelAngles]]) -> str:
        lines = [
            "FOLD SEQUENCE (degrees)",
            "=" * 62,
            f"{'Progress':<10}" + "".join(f"{h:>10}" for h in self.HEADERS),
            "-" * 62,
        ]
        for progress, angles in samples:
            degrees = [math.degrees(a) for a in angles.as_tuple()]
            lines.append(f"{progress:<10.3f}" + "".join(f"{d:>10.1f}" for d in degrees))
        return "\n".join(lines)


class NetOutlineFormatter:
    """Lists die-line geometry: panels, score and cut lines, slots."""

    def format(self, outline: NetOutline | None) -> str:
        if outline is None:
            return "No net outline to display."

        unit = outline.unit_suffix
        lines = [
            "NET OUTLINE",
            "=" * 60,
            f"Bounding box: {outline.width:.3f} x {outline.height:.3f} {unit}",
            "",
            "Panels:",
        ]
        for panel in outline.panels:
            lines.append(
                f"  {panel.label:<10} x={panel.x:<9.3f} y={panel.y:<9.3f} "
                f"{panel.width:.3f} x {panel.height:.3f}"
            )
        lines.append("")
        lines.append(f"Score lines ({len(outline.score_lines)}):")
        for line in outline.score_lines:
            lines.append(f"  {_point(line.start)} -> {_point(line.end)}")
        lines.append(f"Cut lines ({len(outline.cut_lines)}):")
        for line in outline.cut_lines:
            lines.append(f"  {_point(line.start)} -> {_point(line.end)}")
        lines.append(f"Slots: {len(outline.slots)}")
        return "\n".join(lines)


def _point(point: tuple[float, float]) -> str:
    return f"({point[0]:.3f}, {point[1]:.3f})"


class JsonExporter:
    """Exports a design as JSON."""

    def to_dict(self, output: BoxDesignOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors}

        dims = output.dimensions
        data: dict[str, Any] = {
            "box": {
                "length": dims.length,
                "width": dims.width,
                "height": dims.height,
                "flute": dims.flute.name,
                "units": output.units.value,
            },
            "layout": output.layout.to_dict(),
            "analysis": output.analysis.to_dict(),
        }
        if output.outline is not None:
            data["net"] = {
                "width": output.outline.width,
                "height": output.outline.height,
                "panels": [
                    {
                        "label": p.label,
                        "region": p.region.value,
                        "x": p.x,
                        "y": p.y,
                        "width": p.width,
                        "height": p.height,
                    }
                    for p in output.outline.panels
                ],
                "lines": [
                    {
                        "type": line.line_type.value,
                        "start": list(line.start),
                        "end": list(line.end),
                    }
                    for line in output.outline.lines
                ],
                "slots": [[list(pt) for pt in slot] for slot in output.outline.slots],
                "glue_tab": [list(pt) for pt in output.outline.glue_tab],
            }
        return data

    def export(self, output: BoxDesignOutput) -> str:
        """Export design output as JSON string."""
        return json.dumps(self.to_dict(output), indent=2)


__all__ = [
    "FoldTableFormatter",
    "JsonExporter",
    "NetOutlineFormatter",
    "PanelLayoutFormatter",
    "StructuralReportFormatter",
]
