"""Tests for paint style construction."""

import pytest

from roundrect.errors import InvalidInput, UnsupportedOption
from roundrect.models import GradientFill, PaintStyle, SolidFill
from roundrect.config import StyleConfig
from roundrect.paint.style import make_fill, make_gradient, make_style, resolve_style


class TestMakeGradient:
    """Tests for gradient fills."""

    def test_default_stops_evenly_spaced(self):
        gradient = make_gradient(["red", "white", "blue", "black"])

        assert gradient.kind == "linear"
        assert gradient.stops == pytest.approx([0.0, 1 / 3, 2 / 3, 1.0])

    def test_explicit_stops(self):
        gradient = make_gradient(["red", "blue"], stops=[0.2, 0.8], kind="radial")

        assert gradient.kind == "radial"
        assert gradient.stops == [0.2, 0.8]

    def test_unknown_type(self):
        """Only linear and radial gradients exist."""
        with pytest.raises(UnsupportedOption) as exc:
            make_gradient(["red", "blue"], kind="conic")

        assert "must be 'linear' or 'radial'" in str(exc.value)
        assert exc.value.option == "gradient_type"

    def test_stop_count_mismatch(self):
        with pytest.raises(InvalidInput):
            make_gradient(["red", "blue"], stops=[0.0, 0.5, 1.0])

    def test_descending_stops(self):
        with pytest.raises(InvalidInput):
            make_gradient(["red", "blue"], stops=[0.9, 0.1])

    def test_single_colour_is_not_a_gradient(self):
        with pytest.raises(InvalidInput):
            make_gradient(["red"])


class TestMakeStyle:
    """Tests for PaintStyle construction."""

    def test_defaults(self):
        style = make_style()

        assert style == PaintStyle()
        assert style.fill is None
        assert style.stroke_color == "black"
        assert style.stroke_cap == "round"

    def test_single_colour(self):
        assert make_style(fill="tomato").fill == SolidFill(color="tomato")

    def test_colour_list_becomes_gradient(self):
        style = make_style(fill=["red", "blue"], gradient_stops=[0.0, 0.4])

        assert isinstance(style.fill, GradientFill)
        assert style.fill.stops == [0.0, 0.4]

    def test_one_element_list_is_solid(self):
        assert make_fill(["navy"]) == SolidFill(color="navy")

    def test_opacity_out_of_range(self):
        with pytest.raises(InvalidInput):
            make_style(opacity=1.5)

    def test_negative_stroke_width(self):
        with pytest.raises(InvalidInput):
            make_style(stroke_width=-1)

    @pytest.mark.parametrize("stroke_style", ["wavy", "Dashed", ""])
    def test_unknown_stroke_style(self, stroke_style):
        with pytest.raises(UnsupportedOption) as exc:
            make_style(stroke_style=stroke_style)
        assert exc.value.option == "stroke_style"

    def test_unknown_stroke_cap(self):
        with pytest.raises(UnsupportedOption) as exc:
            make_style(stroke_cap="pointy")
        assert exc.value.option == "stroke_cap"

    def test_blank_stroke_style_accepted(self):
        assert make_style(stroke_style="blank").stroke_style == "blank"


class TestMakeFill:
    """Tests for fill parsing."""

    @pytest.mark.parametrize("fill", [5, 0.5, True, {"red": 1}, b"red", [1, 2], []])
    def test_rejects_non_colours(self, fill):
        with pytest.raises(InvalidInput) as exc:
            make_fill(fill)
        assert exc.value.argument == "fill"

    def test_tuple_of_colours(self):
        assert isinstance(make_fill(("red", "white", "blue")), GradientFill)


class TestResolveStyle:
    """Tests for style resolution."""

    def test_prebuilt_style_with_unknown_stroke(self):
        with pytest.raises(UnsupportedOption):
            resolve_style(PaintStyle(stroke_style="wavy"), StyleConfig())

    def test_mapping_with_scalar_fill(self):
        with pytest.raises(InvalidInput) as exc:
            resolve_style({"fill": 5}, StyleConfig())
        assert exc.value.argument == "fill"
