"""
Command-line interface for roundrect.

Draws single rounded rectangles or rounded bar charts to SVG (and PNG).
"""

import argparse
import sys

from roundrect.config import load_config, save_default_config
from roundrect.errors import RoundRectError
from roundrect.tracer import configure_tracer, get_tracer


def _add_trace_arguments(parser):
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    parser.add_argument(
        "--trace-level",
        default="INFO",
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )


def _add_output_arguments(parser, default_out):
    parser.add_argument(
        "--out", "-o",
        default=default_out,
        help="Output SVG file",
    )
    parser.add_argument(
        "--png",
        default=None,
        help="Also render the drawing to this PNG file (needs cairosvg)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--canvas-size",
        nargs=2,
        type=int,
        default=None,
        metavar=("W", "H"),
        help="Canvas size in pixels",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="roundrect",
        description="roundrect: rectangles with an independent radius on every corner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Draw command
    draw_parser = subparsers.add_parser("draw", help="Draw one rounded rectangle")
    draw_parser.add_argument("--position", nargs=2, type=float, default=[0.5, 0.5], metavar=("X", "Y"))
    draw_parser.add_argument("--size", nargs=2, type=float, default=[1.0, 1.0], metavar=("W", "H"))
    draw_parser.add_argument(
        "--corners",
        nargs="+",
        type=float,
        default=[0.15, 0.15, 0.15, 0.15],
        metavar="R",
        help="Radii clockwise from top-left (exactly 4)",
    )
    draw_parser.add_argument("--just", default="centre", help="Justification of --position")
    draw_parser.add_argument("--fill", nargs="+", default=None, help="Fill colour, or several for a gradient")
    draw_parser.add_argument("--gradient-type", default=None, help="linear or radial")
    draw_parser.add_argument("--stroke", default=None, help="Stroke colour ('none' for no outline)")
    draw_parser.add_argument("--stroke-width", type=float, default=None)
    draw_parser.add_argument("--stroke-style", default=None, help="solid, dashed, dotted, ...")
    draw_parser.add_argument("--stroke-cap", default=None, help="round, butt or square")
    draw_parser.add_argument("--opacity", type=float, default=None)
    draw_parser.add_argument("--points", type=int, default=None, help="Samples per rounded corner")
    draw_parser.add_argument("--path-json", default=None, help="Write the outline vertices to this JSON file")
    draw_parser.add_argument("--check", action="store_true", help="Run geometric checks on the outline")
    _add_output_arguments(draw_parser, "roundrect.svg")
    _add_trace_arguments(draw_parser)

    # Bars command
    bars_parser = subparsers.add_parser("bars", help="Draw a rounded bar chart")
    bars_parser.add_argument("--x", nargs="+", type=float, required=True, help="Bar positions")
    bars_parser.add_argument("--y", nargs="+", type=float, required=True, help="Bar values")
    bars_parser.add_argument("--width", type=float, default=None, help="Bar width in normalized units")
    bars_parser.add_argument("--radius", nargs="+", type=float, default=None, help="One radius or four")
    bars_parser.add_argument("--fill", nargs="+", default=None, help="One colour, or one per bar")
    bars_parser.add_argument("--no-rescale", action="store_true", help="Treat --x and --y as normalized already")
    _add_output_arguments(bars_parser, "bars.svg")
    _add_trace_arguments(bars_parser)

    # Init config command
    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="roundrect_config.yaml",
        help="Output path for config file",
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "draw":
        return handle_draw(args)
    elif args.command == "bars":
        return handle_bars(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def _prepare(args):
    """Load config, apply canvas overrides and configure tracing."""
    config = load_config(args.config)
    if args.canvas_size:
        config.canvas.width_px, config.canvas.height_px = args.canvas_size

    configure_tracer(
        enabled=args.trace or config.tracing.enabled,
        level=args.trace_level if args.trace else config.tracing.level,
        file_path=args.trace_file or config.tracing.file_path,
        json_output=args.trace_json or config.tracing.json_output,
    )
    return config


def _write_outputs(canvas, args, config):
    canvas.save(args.out)
    print(f"SVG saved to: {args.out}")
    if args.png:
        if canvas.render_png(args.out, args.png, dpi=config.export.png_dpi):
            print(f"PNG saved to: {args.png}")
        else:
            print("PNG render skipped (cairosvg unavailable or failed)", file=sys.stderr)


def _style_overrides(args):
    overrides = {}
    if args.fill is not None:
        overrides["fill"] = args.fill[0] if len(args.fill) == 1 else args.fill
    if args.gradient_type is not None:
        overrides["gradient_type"] = args.gradient_type
    if args.stroke is not None:
        overrides["stroke_color"] = None if args.stroke.lower() == "none" else args.stroke
    if args.stroke_width is not None:
        overrides["stroke_width"] = args.stroke_width
    if args.stroke_style is not None:
        overrides["stroke_style"] = args.stroke_style
    if args.stroke_cap is not None:
        overrides["stroke_cap"] = args.stroke_cap
    if args.opacity is not None:
        overrides["opacity"] = args.opacity
    return overrides


def handle_draw(args):
    """Handle the draw command."""
    config = _prepare(args)
    tracer = get_tracer()

    try:
        from roundrect.draw import draw_rounded_rect
        from roundrect.io.save_artifacts import save_path_json
        from roundrect.models import RectSpec
        from roundrect.paint.canvas import Canvas
        from roundrect.paint.style import resolve_style
        from roundrect.validate import format_report, run_path_checks

        with tracer.span("cli_draw", module="cli"):
            style = resolve_style(_style_overrides(args), config.style)
            path = draw_rounded_rect(
                args.position,
                args.size,
                args.corners,
                style,
                just=args.just,
                n_points=args.points,
                output_as_path=True,
                name="roundrect",
                config=config,
            )
            canvas = Canvas.from_config(config.canvas)
            canvas.paint_path(path, style)
            _write_outputs(canvas, args, config)

            if args.path_json:
                save_path_json(path, args.path_json)
                print(f"Outline saved to: {args.path_json}")

            if args.check:
                rect = RectSpec(
                    x=args.position[0], y=args.position[1],
                    width=args.size[0], height=args.size[1], just=args.just,
                )
                report = run_path_checks(path, rect, tolerance=config.correction.tolerance)
                print(format_report(report))
                if report.has_errors:
                    return 1

        return 0

    except RoundRectError as e:
        tracer.event(f"Draw failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1


def handle_bars(args):
    """Handle the bars command."""
    config = _prepare(args)
    tracer = get_tracer()

    try:
        from roundrect.paint.canvas import Canvas
        from roundrect.plot import draw_rounded_bars, rescale

        with tracer.span("cli_bars", module="cli"):
            if len(args.x) != len(args.y):
                print("\nError: --x and --y must have the same number of values", file=sys.stderr)
                return 1

            x, y, baseline = args.x, args.y, 0.0
            if not args.no_rescale:
                # Half a slot of padding on each side; bars grow from data 0.
                n = len(x)
                lo, hi = min(x), max(x)
                pad = 0.5 if n == 1 or hi == lo else (hi - lo) / (n - 1) / 2
                x = rescale(x, from_range=(lo - pad, hi + pad))
                y_range = (min(0.0, min(y)), max(0.0, max(y)))
                baseline = float(rescale([0.0], from_range=y_range)[0])
                y = rescale(y, from_range=y_range)

            fill = None
            if args.fill is not None:
                fill = args.fill[0] if len(args.fill) == 1 else args.fill
            radius = None
            if args.radius is not None:
                radius = args.radius[0] if len(args.radius) == 1 else args.radius

            canvas = Canvas.from_config(config.canvas)
            draw_rounded_bars(
                x, y,
                canvas=canvas,
                name="bars",
                width=args.width,
                r=radius,
                baseline=baseline,
                fill=fill,
                config=config,
            )
            _write_outputs(canvas, args, config)

        print(f"Bars drawn: {len(args.x)}")
        return 0

    except RoundRectError as e:
        tracer.event(f"Bars failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
