"""Tests for pad extraction and shape mapping."""

from __future__ import annotations

import logging

import pytest

from kicad_pad_import.config import ImportSettings
from kicad_pad_import.exceptions import InvalidFieldValue, NoPadsFound, UnsupportedShape
from kicad_pad_import.schema import (
    Pad,
    PadShape,
    Position,
    Size,
    extract_pad,
    extract_pads,
    is_top_copper,
    shape_roundness,
)
from kicad_pad_import.sexp import parse

SETTINGS = ImportSettings()

ROUNDRECT_PAD = (
    '(pad "1" smd roundrect (at -1.4625 0) (size 1.125 1.75)'
    ' (layers "F.Cu" "F.Paste" "F.Mask") (roundrect_rratio 0.222222))'
)


def _pad(text: str) -> Pad | None:
    return extract_pad(parse(text), SETTINGS)


class TestShapeRoundness:
    def test_rect(self) -> None:
        assert shape_roundness("rect") == (PadShape.RECT, 0.0)

    def test_circle(self) -> None:
        assert shape_roundness("circle") == (PadShape.CIRCLE, 100.0)

    def test_oval(self) -> None:
        assert shape_roundness("oval") == (PadShape.OVAL, 100.0)

    def test_roundrect_keeps_ratio_unscaled(self) -> None:
        assert shape_roundness("roundrect", 0.25) == (PadShape.ROUNDRECT, 0.25)

    @pytest.mark.parametrize("shape", ["trapezoid", "custom", "hexagon", ""])
    def test_unsupported(self, shape: str) -> None:
        with pytest.raises(UnsupportedShape) as exc_info:
            shape_roundness(shape)
        assert exc_info.value.shape == shape


class TestIsTopCopper:
    def test_front_copper(self) -> None:
        assert is_top_copper(["F.Cu", "F.Paste"])

    def test_all_copper_wildcard(self) -> None:
        assert is_top_copper(["*.Cu", "*.Mask"])

    def test_wildcard_is_substring_match(self) -> None:
        assert is_top_copper(["F&*.Cu"])

    def test_back_copper_only(self) -> None:
        assert not is_top_copper(["B.Cu", "B.Paste", "B.Mask"])

    def test_no_glob_evaluation(self) -> None:
        assert not is_top_copper(["F.*"])
        assert not is_top_copper(["f.cu"])

    def test_empty(self) -> None:
        assert not is_top_copper([])


class TestExtractPad:
    def test_roundrect_pad(self) -> None:
        pad = _pad(ROUNDRECT_PAD)
        assert pad == Pad(
            name="1",
            mount_type="smd",
            shape=PadShape.ROUNDRECT,
            x=-1.4625,
            y=0.0,
            rotation=0.0,
            width=1.125,
            height=1.75,
            roundness=0.222222,
        )

    def test_rotation(self) -> None:
        pad = _pad('(pad "A1" smd rect (at 1 2 90) (size 1 1) (layers "F.Cu"))')
        assert pad is not None
        assert pad.position == Position(1.0, 2.0, 90.0)
        assert pad.size == Size(1.0, 1.0)
        assert pad.roundness == 0.0

    def test_missing_fields_default_to_zero(self) -> None:
        pad = _pad('(pad "1" smd roundrect (layers "F.Cu"))')
        assert pad is not None
        assert (pad.x, pad.y, pad.rotation, pad.width, pad.height, pad.roundness) == (
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
        )

    def test_partial_size(self) -> None:
        pad = _pad('(pad "1" smd circle (size 1.5) (layers "F.Cu"))')
        assert pad is not None
        assert pad.width == 1.5
        assert pad.height == 0.0

    def test_back_copper_excluded(self) -> None:
        assert _pad('(pad "1" smd roundrect (at 0 0) (size 1 1) (layers "B.Cu"))') is None

    def test_thru_hole_excluded(self) -> None:
        text = '(pad "1" thru_hole circle (at 0 0) (size 1.7 1.7) (drill 1) (layers "*.Cu" "*.Mask"))'
        assert _pad(text) is None

    def test_no_layers_excluded(self) -> None:
        assert _pad('(pad "1" smd rect (at 0 0) (size 1 1))') is None

    def test_missing_items_excluded(self) -> None:
        assert _pad('(pad (layers "F.Cu"))') is None

    def test_unsupported_shape_names_pad(self) -> None:
        with pytest.raises(UnsupportedShape) as exc_info:
            _pad('(pad "7" smd trapezoid (at 0 0) (size 1 1) (layers "F.Cu"))')
        assert exc_info.value.pad_name == "7"
        assert exc_info.value.shape == "trapezoid"

    def test_unsupported_shape_not_checked_for_excluded_pad(self) -> None:
        assert _pad('(pad "7" thru_hole trapezoid (layers "F.Cu"))') is None

    def test_invalid_number(self) -> None:
        with pytest.raises(InvalidFieldValue) as exc_info:
            _pad('(pad "1" smd rect (at abc 0) (layers "F.Cu"))')
        assert exc_info.value.field == "at[0]"
        assert exc_info.value.value == "abc"

    @pytest.mark.parametrize("value", ["1_000", "nan", "inf", "-Infinity"])
    def test_rejects_non_decimal_numbers(self, value: str) -> None:
        with pytest.raises(InvalidFieldValue) as exc_info:
            _pad(f'(pad "1" smd rect (at {value} 0) (layers "F.Cu"))')
        assert exc_info.value.value == value

    def test_unsupported_shape_checked_before_fields(self) -> None:
        with pytest.raises(UnsupportedShape):
            _pad('(pad "1" smd trapezoid (size abc 1) (layers "F.Cu"))')

    def test_custom_settings(self) -> None:
        settings = ImportSettings(top_copper_layer="B.Cu")
        pad = extract_pad(parse('(pad "1" smd rect (layers "B.Cu"))'), settings)
        assert pad is not None

    def test_to_dict(self) -> None:
        pad = _pad(ROUNDRECT_PAD)
        assert pad is not None
        assert pad.to_dict() == {
            "name": "1",
            "mount_type": "smd",
            "shape": "roundrect",
            "x": -1.4625,
            "y": 0.0,
            "rotation": 0.0,
            "width": 1.125,
            "height": 1.75,
            "roundness": 0.222222,
        }


class TestExtractPads:
    def test_document_order(self) -> None:
        root = parse(
            '(footprint "X"'
            ' (pad "2" smd rect (layers "F.Cu"))'
            ' (pad "1" smd rect (layers "F.Cu"))'
            ' (pad "3" smd rect (layers "F.Cu")))'
        )
        assert [p.name for p in extract_pads(root, SETTINGS)] == ["2", "1", "3"]

    def test_unsupported_shape_skipped_and_rest_extracted(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        root = parse(
            '(footprint "X"'
            ' (pad "1" smd trapezoid (size 1 1) (layers "F.Cu"))'
            ' (pad "2" smd oval (size 1 2) (layers "F.Cu")))'
        )
        warnings: list[str] = []
        with caplog.at_level(logging.WARNING):
            pads = extract_pads(root, SETTINGS, warnings)
        assert [p.name for p in pads] == ["2"]
        assert len(warnings) == 1
        assert "trapezoid" in warnings[0]
        assert "trapezoid" in caplog.text

    def test_no_pads_found(self) -> None:
        root = parse('(footprint "X" (layer "F.Cu") (attr smd))')
        with pytest.raises(NoPadsFound):
            extract_pads(root, SETTINGS)

    def test_pads_present_but_none_included(self) -> None:
        root = parse('(footprint "X" (pad "1" smd rect (layers "B.Cu")))')
        assert extract_pads(root, SETTINGS) == []

    def test_root_pad_counts(self) -> None:
        pads = extract_pads(parse(ROUNDRECT_PAD), SETTINGS)
        assert [p.name for p in pads] == ["1"]
