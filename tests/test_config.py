"""Tests for run configuration."""

from __future__ import annotations

import pytest

from scoring.shapes import ShapeKind
from selection.config import ConfigError, RedrawConfig, parse_shapes


class TestParseShapes:
    def test_comma_list_keeps_order(self):
        assert parse_shapes("rectangles,lines") == (ShapeKind.RECTANGLE, ShapeKind.LINE)

    def test_accepts_kinds(self):
        assert parse_shapes([ShapeKind.LINE]) == (ShapeKind.LINE,)

    @pytest.mark.parametrize("spec", ["", "lines,circles", "triangles"])
    def test_unknown(self, spec):
        with pytest.raises(ConfigError):
            parse_shapes(spec)

    def test_empty_list(self):
        with pytest.raises(ConfigError):
            parse_shapes([])


class TestRedrawConfig:
    def test_defaults_are_valid(self):
        cfg = RedrawConfig().validate()
        assert cfg.shapes == (ShapeKind.LINE,)
        assert cfg.iterations == 500000

    @pytest.mark.parametrize("kwargs", [
        dict(iterations=-1),
        dict(min_size=5, max_size=5),
        dict(min_size=-1),
        dict(adapt_rate=0),
        dict(adapt_coeff=1.0),
        dict(adapt_coeff=0.0),
        dict(animation_interval=0),
        dict(blur_amount=-0.1),
        dict(shapes=()),
    ])
    def test_rejects(self, kwargs):
        with pytest.raises(ConfigError):
            RedrawConfig(**kwargs).validate()

    def test_to_dict_is_json_friendly(self):
        d = RedrawConfig(shapes=("lines", "rectangles")).validate().to_dict()
        assert d["shapes"] == ["line", "rectangle"]
