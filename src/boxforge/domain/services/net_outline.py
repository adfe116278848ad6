"""Positioned geometry of the flat blank.

Turns a PanelLayout into the rectangles, score lines, cut lines and slot
cut-outs that a flat-pattern renderer or a die-line exporter draws. The
origin is the top-left corner of the net's bounding box, with y growing
downward.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from boxforge.domain.units import IN_TO_MM
from boxforge.domain.value_objects import PanelLayout

Point = tuple[float, float]

# Glue tab chamfer in inches, scaled with the layout's unit system
GLUE_TAB_TAPER_X: float = 0.4
GLUE_TAB_TAPER_Y: float = 0.6

BODY_PANEL_LABELS: tuple[str, str, str, str] = ("A", "B", "C", "D")


class LineType(str, Enum):
    """Die-line stroke types."""

    CUT = "cut"
    SCORE = "score"


class NetRegion(str, Enum):
    BODY = "body"
    TOP_FLAP = "top_flap"
    BOTTOM_FLAP = "bottom_flap"


@dataclass(frozen=True)
class NetPanel:
    """Axis-aligned rectangle on the blank."""

    label: str
    region: NetRegion
    x: float
    y: float
    width: float
    height: float

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners clockwise from top-left."""
        return (
            (self.x, self.y),
            (self.x + self.width, self.y),
            (self.x + self.width, self.y + self.height),
            (self.x, self.y + self.height),
        )


@dataclass(frozen=True)
class NetLine:
    start: Point
    end: Point
    line_type: LineType

    @property
    def length(self) -> float:
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return (dx * dx + dy * dy) ** 0.5


@dataclass(frozen=True)
class NetOutline:
    """Complete die-line geometry for one layout."""

    width: float
    height: float
    unit_suffix: str
    panels: tuple[NetPanel, ...]
    lines: tuple[NetLine, ...]
    slots: tuple[tuple[Point, ...], ...]
    glue_tab: tuple[Point, ...]
    panel_stations: tuple[float, ...] = field(default_factory=tuple)

    @property
    def score_lines(self) -> list[NetLine]:
        return [line for line in self.lines if line.line_type == LineType.SCORE]

    @property
    def cut_lines(self) -> list[NetLine]:
        return [line for line in self.lines if line.line_type == LineType.CUT]

    def panels_in(self, region: NetRegion) -> list[NetPanel]:
        return [panel for panel in self.panels if panel.region == region]


class NetOutlineBuilder:
    """Builds a NetOutline from a PanelLayout."""

    def build(self, layout: PanelLayout) -> NetOutline:
        """Lay out the blank left to right: glue tab, A, B, C, D.

        Args:
            layout: Panel dimensions in any unit system.

        Returns:
            NetOutline in the same units as the layout.
        """
        scale = IN_TO_MM if layout.unit_suffix == "mm" else 1.0

        x_glue = layout.glue_tab_width
        widths = (
            layout.panel_width_long,
            layout.panel_width_short,
            layout.panel_width_long,
            layout.panel_width_short,
        )
        stations = [x_glue]
        for width in widths:
            stations.append(stations[-1] + width)
        x_end = stations[-1]

        y_flap = layout.flap_height
        y_body_bottom = y_flap + layout.panel_height
        y_bottom = y_body_bottom + layout.flap_height

        panels: list[NetPanel] = []
        for label, x, width in zip(BODY_PANEL_LABELS, stations, widths):
            panels.append(
                NetPanel(label, NetRegion.BODY, x, y_flap, width, layout.panel_height)
            )
            panels.append(
                NetPanel(f"{label}-top", NetRegion.TOP_FLAP, x, 0.0, width, y_flap)
            )
            panels.append(
                NetPanel(
                    f"{label}-bottom",
                    NetRegion.BOTTOM_FLAP,
                    x,
                    y_body_bottom,
                    width,
                    layout.flap_height,
                )
            )

        lines = [
            NetLine((x_glue, 0.0), (x_end, 0.0), LineType.CUT),
            NetLine((x_glue, y_bottom), (x_end, y_bottom), LineType.CUT),
            NetLine((x_end, y_flap), (x_end, y_body_bottom), LineType.CUT),
        ]
        # Vertical folds at the glue joint and between body panels
        for x in stations[:-1]:
            lines.append(NetLine((x, y_flap), (x, y_body_bottom), LineType.SCORE))
        lines.append(NetLine((x_glue, y_flap), (x_end, y_flap), LineType.SCORE))
        lines.append(
            NetLine((x_glue, y_body_bottom), (x_end, y_body_bottom), LineType.SCORE)
        )

        half_slot = layout.slot_width / 2
        slots: list[tuple[Point, ...]] = []
        for x in stations[1:]:
            slots.append(
                (
                    (x - half_slot, 0.0),
                    (x + half_slot, 0.0),
                    (x + half_slot * 0.5, y_flap),
                    (x - half_slot * 0.5, y_flap),
                )
            )
            slots.append(
                (
                    (x - half_slot * 0.5, y_body_bottom),
                    (x + half_slot * 0.5, y_body_bottom),
                    (x + half_slot, y_bottom),
                    (x - half_slot, y_bottom),
                )
            )

        taper_x = GLUE_TAB_TAPER_X * scale
        taper_y = GLUE_TAB_TAPER_Y * scale
        glue_tab = (
            (taper_x, y_flap),
            (x_glue, y_flap),
            (x_glue, y_body_bottom),
            (taper_x, y_body_bottom),
            (0.0, y_body_bottom - taper_y),
            (0.0, y_flap + taper_y),
        )

        return NetOutline(
            width=layout.total_width,
            height=layout.total_height,
            unit_suffix=layout.unit_suffix,
            panels=tuple(panels),
            lines=tuple(lines),
            slots=tuple(slots),
            glue_tab=glue_tab,
            panel_stations=tuple(stations),
        )


def build_net_outline(layout: PanelLayout) -> NetOutline:
    return NetOutlineBuilder().build(layout)


__all__ = [
    "BODY_PANEL_LABELS",
    "GLUE_TAB_TAPER_X",
    "GLUE_TAB_TAPER_Y",
    "LineType",
    "NetLine",
    "NetOutline",
    "NetOutlineBuilder",
    "NetPanel",
    "NetRegion",
    "Point",
    "build_net_outline",
]
