"""Tests for the command-line interface."""

import json
import os

import yaml

from roundrect.cli import main


class TestDrawCommand:
    """Tests for `roundrect draw`."""

    def test_writes_svg_and_path(self, temp_dir, capsys):
        svg_path = os.path.join(temp_dir, "card.svg")
        json_path = os.path.join(temp_dir, "card.json")

        code = main([
            "draw",
            "--position", "0.5", "0.5",
            "--size", "0.8", "0.5",
            "--corners", "0.2", "0.05", "0.2", "0.05",
            "--fill", "steelblue",
            "--points", "6",
            "--out", svg_path,
            "--path-json", json_path,
            "--check",
        ])

        assert code == 0
        with open(svg_path, encoding="utf-8") as f:
            svg = f.read()
        assert 'fill-rule="evenodd"' in svg
        assert 'fill="steelblue"' in svg

        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
        assert len(data["vertices"]) == 24
        assert data["fill_rule"] == "evenodd"

        out = capsys.readouterr().out
        assert "Failed: 0" in out

    def test_gradient_fill(self, temp_dir):
        svg_path = os.path.join(temp_dir, "grad.svg")

        code = main(["draw", "--fill", "red", "yellow", "--gradient-type", "radial", "--out", svg_path])

        assert code == 0
        with open(svg_path, encoding="utf-8") as f:
            assert "radialGradient" in f.read()

    def test_three_corners_fails(self, temp_dir, capsys):
        svg_path = os.path.join(temp_dir, "bad.svg")

        code = main(["draw", "--corners", "0.1", "0.1", "0.1", "--out", svg_path])

        assert code == 1
        assert not os.path.exists(svg_path)
        assert "corners" in capsys.readouterr().err

    def test_unknown_gradient_type_fails(self, temp_dir, capsys):
        code = main([
            "draw", "--fill", "red", "blue", "--gradient-type", "conic",
            "--out", os.path.join(temp_dir, "x.svg"),
        ])

        assert code == 1
        assert "linear' or 'radial'" in capsys.readouterr().err

    def test_config_file(self, temp_dir):
        config_path = os.path.join(temp_dir, "config.yaml")
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"arc": {"n_points": 3}, "canvas": {"width_px": 120, "height_px": 60}}, f)
        json_path = os.path.join(temp_dir, "p.json")
        svg_path = os.path.join(temp_dir, "p.svg")

        code = main(["draw", "--config", config_path, "--out", svg_path, "--path-json", json_path])

        assert code == 0
        with open(json_path, encoding="utf-8") as f:
            assert len(json.load(f)["vertices"]) == 12
        with open(svg_path, encoding="utf-8") as f:
            assert 'width="120px"' in f.read()


class TestBarsCommand:
    """Tests for `roundrect bars`."""

    def test_writes_bars(self, temp_dir, capsys):
        svg_path = os.path.join(temp_dir, "bars.svg")

        code = main(["bars", "--x", "1", "2", "3", "--y", "4", "2", "5", "--radius", "0.03", "--out", svg_path])

        assert code == 0
        with open(svg_path, encoding="utf-8") as f:
            svg = f.read()
        assert svg.count("<path") == 3
        assert "Bars drawn: 3" in capsys.readouterr().out

    def test_mismatched_lengths(self, temp_dir):
        code = main(["bars", "--x", "1", "2", "--y", "4", "--out", os.path.join(temp_dir, "b.svg")])

        assert code == 1


class TestInitConfig:
    """Tests for `roundrect init-config`."""

    def test_writes_defaults(self, temp_dir):
        path = os.path.join(temp_dir, "roundrect.yaml")

        assert main(["init-config", "--out", path]) == 0

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        assert data["correction"]["strategy"] == "global"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
