"""
Pydantic data models for roundrect.

Geometry (rectangles, radii, paths) and paint styles are kept in separate
models so the geometry can be built and tested without any renderer.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator
from shapely.geometry import Polygon


CORNER_NAMES = ("top_left", "top_right", "bottom_right", "bottom_left")


class Severity(str, Enum):
    """Severity levels for path checks."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"


class RectSpec(BaseModel):
    """Rectangle placement: anchor position, size and justification."""
    x: float = 0.5
    y: float = 0.5
    width: float = Field(default=1.0, ge=0.0)
    height: float = Field(default=1.0, ge=0.0)
    just: Union[str, List[str], List[float]] = "centre"

    model_config = ConfigDict(extra="forbid")

    def edges(self):
        """Return (left, right, bottom, top)."""
        from roundrect.geometry.path_builder import resolve_edges
        return resolve_edges(self)


class CornerRadii(BaseModel):
    """Four corner radii, clockwise from the top-left corner."""
    top_left: float = Field(default=0.0, ge=0.0)
    top_right: float = Field(default=0.0, ge=0.0)
    bottom_right: float = Field(default=0.0, ge=0.0)
    bottom_left: float = Field(default=0.0, ge=0.0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_sequence(cls, values):
        """Build from a (tl, tr, br, bl) sequence."""
        return cls(**dict(zip(CORNER_NAMES, (float(v) for v in values))))

    def as_tuple(self):
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)


class RoundRectPath(BaseModel):
    """
    Closed outline of a rounded rectangle.

    The last vertex connects back to the first; the closing segment is the
    top edge and is not stored twice.
    """
    vertices: List[List[float]] = Field(default_factory=list)
    fill_rule: Literal["evenodd"] = "evenodd"
    closed: bool = True
    radii: CornerRadii = Field(default_factory=CornerRadii)
    arc_points: int = 20
    name: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    def __len__(self):
        return len(self.vertices)

    def to_array(self):
        """Vertices as an (N, 2) float array."""
        return np.asarray(self.vertices, dtype=float).reshape(-1, 2)

    def to_polygon(self):
        """Vertices as a shapely Polygon (closed implicitly)."""
        return Polygon(self.vertices)

    def to_svg_d(self, precision=4):
        """SVG path data for the outline in model coordinates."""
        if not self.vertices:
            return ""
        parts = []
        for i, (x, y) in enumerate(self.vertices):
            parts.append(f"{'M' if i == 0 else 'L'} {x:.{precision}f} {y:.{precision}f}")
        parts.append("Z")
        return " ".join(parts)

    @property
    def bounds(self):
        """[min_x, min_y, max_x, max_y] of the vertices."""
        if not self.vertices:
            return [0.0, 0.0, 0.0, 0.0]
        arr = self.to_array()
        return [*arr.min(axis=0).tolist(), *arr.max(axis=0).tolist()]


class SolidFill(BaseModel):
    """Single colour fill."""
    kind: Literal["solid"] = "solid"
    color: str

    model_config = ConfigDict(extra="forbid")


class GradientFill(BaseModel):
    """Linear or radial gradient between two or more colours."""
    kind: Literal["linear", "radial"] = "linear"
    colors: List[str] = Field(..., min_length=2)
    stops: List[float]

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_stops(self):
        if len(self.stops) != len(self.colors):
            raise ValueError("gradient stops must match the number of colours")
        if any(s < 0.0 or s > 1.0 for s in self.stops):
            raise ValueError("gradient stops must lie in [0, 1]")
        if any(b < a for a, b in zip(self.stops, self.stops[1:])):
            raise ValueError("gradient stops must be ascending")
        return self


Fill = Annotated[Union[SolidFill, GradientFill], Field(discriminator="kind")]


class PaintStyle(BaseModel):
    """Paint attributes forwarded untouched to the paint step."""
    fill: Optional[Fill] = None
    stroke_color: Optional[str] = "black"
    stroke_width: float = Field(default=1.0, ge=0.0)
    stroke_style: str = "solid"
    stroke_cap: str = "round"
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = ConfigDict(extra="forbid")


class Shape(BaseModel):
    """A path together with the style it is painted with."""
    path: RoundRectPath
    style: PaintStyle = Field(default_factory=PaintStyle)

    model_config = ConfigDict(extra="forbid")


class CheckResult(BaseModel):
    """Result of a single path check."""
    rule_id: str
    severity: Severity
    passed: bool
    message: str
    evidence: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class ValidationReport(BaseModel):
    """Collection of path check results."""
    checks: List[CheckResult] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def has_errors(self):
        return self.error_count > 0

    @property
    def error_count(self):
        """Count of failed error-level checks."""
        return sum(1 for c in self.checks if c.severity == Severity.ERROR and not c.passed)

    @property
    def warning_count(self):
        """Count of failed warning-level checks."""
        return sum(1 for c in self.checks if c.severity == Severity.WARN and not c.passed)
