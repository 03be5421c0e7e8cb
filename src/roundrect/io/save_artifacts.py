"""
File output helpers for roundrect.

Writes SVG documents, JSON (dicts or pydantic models) and PNG renders.
"""

import json
import os

from roundrect.tracer import get_tracer


def ensure_dir(path):
    """Create directory if it does not exist."""
    if path:
        os.makedirs(path, exist_ok=True)


def save_json(data, path, indent=2):
    """Save a dictionary or pydantic model to JSON."""
    tracer = get_tracer()

    ensure_dir(os.path.dirname(path))

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str)

    tracer.event(f"Saved JSON: {path}")


def save_svg(svg_content, path):
    """Save an svgwrite drawing (or raw SVG text) to a file."""
    tracer = get_tracer()

    ensure_dir(os.path.dirname(path))

    if hasattr(svg_content, "tostring"):
        content = svg_content.tostring()
    else:
        content = str(svg_content)

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    tracer.event(f"Saved SVG: {path}")


def render_svg_to_png(svg_path, png_path, dpi=150):
    """
    Render an SVG file to PNG using cairosvg.

    Returns True when a PNG was written. A missing cairosvg install or a
    cairo failure is reported as a warning and leaves no PNG behind.
    """
    tracer = get_tracer()

    try:
        import cairosvg
    except ImportError:
        tracer.event("cairosvg not available, skipping PNG render", level="WARN")
        return False

    ensure_dir(os.path.dirname(png_path))
    try:
        cairosvg.svg2png(url=svg_path, write_to=png_path, dpi=dpi)
    except Exception as e:
        tracer.event(f"Failed to render SVG: {str(e)}", level="WARN")
        return False

    tracer.event(f"Rendered SVG to PNG: {png_path}")
    return True


def save_path_json(path, file_path):
    """Write a RoundRectPath's vertices and metadata to JSON."""
    save_json(path, file_path)
