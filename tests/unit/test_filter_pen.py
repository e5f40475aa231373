"""Tests for FilterPen and TransformPen."""

import pytest
from fontTools.misc.transform import Identity, Transform
from fontTools.pens.recordingPen import RecordingPen as FontToolsRecordingPen

from glyphpen.core import AreaPen, FilterPen, RecordingPen, TransformPen
from glyphpen.domain import IMPLIED, Glyph
from glyphpen.exceptions import MissingComponentError, MissingCurrentPointError


def draw_sample(pen) -> None:
    """Draw one contour using every kind of segment."""
    pen.moveTo((0, 0))
    pen.lineTo((0, 100))
    pen.curveTo((50, 75), (60, 50), (50, 25), (0, 0))
    pen.closePath()
    pen.qCurveTo((10, 10), (30, 10), (30, -10), None)
    pen.closePath()
    pen.moveTo((200, 0))
    pen.qCurveTo((250, 50), (300, 0))
    pen.endPath()


class TestFilterPen:
    """Tests for FilterPen forwarding."""

    def test_forwards_calls_unchanged(self) -> None:
        """Test every call reaches the output pen as made."""
        out = FontToolsRecordingPen()
        pen = FilterPen(out)
        draw_sample(pen)
        pen.addComponent("a", (1, 0, 0, 1, 0, 0))

        assert [op for op, _ in out.value] == [
            "moveTo",
            "lineTo",
            "curveTo",
            "closePath",
            "qCurveTo",
            "closePath",
            "moveTo",
            "qCurveTo",
            "endPath",
            "addComponent",
        ]
        assert out.value[2] == ("curveTo", ((50, 75), (60, 50), (50, 25), (0, 0)))
        assert out.value[4][1][-1] is None

    def test_errors_propagate(self) -> None:
        """Test errors raised by the output pen are not swallowed."""
        pen = FilterPen(RecordingPen())
        with pytest.raises(MissingCurrentPointError):
            pen.lineTo((10, 10))

    def test_component_errors_propagate(self) -> None:
        """Test strict component errors reach the caller through the filter."""
        from glyphpen.config import PenConfig

        pen = FilterPen(RecordingPen(config=PenConfig(skip_missing_components=False)))
        with pytest.raises(MissingComponentError):
            pen.addComponent("missing", (1, 0, 0, 1, 0, 0))


class TestTransformPen:
    """Tests for TransformPen."""

    def test_accepts_tuple_transformation(self) -> None:
        """Test a 6-tuple is turned into a Transform."""
        pen = TransformPen(RecordingPen(), (1, 0, 0, 1, 10, 20))
        assert isinstance(pen.transformation, Transform)

    def test_transforms_every_point(self) -> None:
        """Test all points of every call are transformed."""
        out = FontToolsRecordingPen()
        pen = TransformPen(out, (2, 0, 0, 2, 10, 0))
        pen.moveTo((0, 0))
        pen.lineTo((5, 5))
        pen.curveTo((1, 1), (2, 2), (3, 3))
        pen.qCurveTo((4, 4), (5, 0))
        pen.closePath()

        assert out.value == [
            ("moveTo", ((10, 0),)),
            ("lineTo", ((20, 10),)),
            ("curveTo", ((12, 2), (14, 4), (16, 6))),
            ("qCurveTo", ((18, 8), (20, 0))),
            ("closePath", ()),
        ]

    @pytest.mark.parametrize("marker", [None, IMPLIED])
    def test_qcurve_keeps_absent_point(self, marker) -> None:
        """Test the absent on-curve marker is forwarded as it is."""
        out = FontToolsRecordingPen()
        pen = TransformPen(out, (1, 0, 0, 1, 100, 0))
        pen.qCurveTo((0, 0), (10, 0), (10, 10), marker)

        op, points = out.value[0]
        assert op == "qCurveTo"
        assert points[:-1] == ((100, 0), (110, 0), (110, 10))
        assert points[-1] is marker

    def test_qcurve_through_base_pen(self) -> None:
        """Test transformed qCurveTo points reach the primitives."""
        out = RecordingPen()
        pen = TransformPen(out, (1, 0, 0, 1, 0, 100))
        pen.qCurveTo((0, 10), (10, 10), None)
        assert out.value[0] == ("moveTo", ((5, 110),))

    def test_component_transformations_compose(self) -> None:
        """Test addComponent composes outer and component transformations."""
        out = FontToolsRecordingPen()
        outer = Transform().scale(2)
        pen = TransformPen(out, outer)
        pen.addComponent("a", (1, 0, 0, 1, 10, 0))

        op, (name, transformation) = out.value[0]
        assert (op, name) == ("addComponent", "a")
        # translate first, then scale
        assert transformation.transformPoint((0, 0)) == (20, 0)
        assert tuple(transformation) == (2, 0, 0, 2, 20, 0)

    def test_nested_pens_equal_composed_transform(self) -> None:
        """Test two stacked transform pens act like one with the composition."""
        a = Transform(1, 0, 0, 1, 30, -5).rotate(0.5)
        b = Transform().scale(1.5, 0.5).skew(0.2)

        nested_out = RecordingPen()
        draw_sample(TransformPen(TransformPen(nested_out, a), b))

        single_out = RecordingPen()
        draw_sample(TransformPen(single_out, a.transform(b)))

        assert len(nested_out.value) == len(single_out.value)
        for (op1, args1), (op2, args2) in zip(nested_out.value, single_out.value):
            assert op1 == op2
            for pt1, pt2 in zip(args1, args2):
                assert pt1 == pytest.approx(pt2)

    def test_nested_components_area(self) -> None:
        """Test nested components scale the measured area by both transforms."""
        glyph_set = {
            "square": Glyph(
                name="square",
                commands=[
                    ("moveTo", ((0, 0),)),
                    ("lineTo", ((10, 0),)),
                    ("lineTo", ((10, 10),)),
                    ("lineTo", ((0, 10),)),
                    ("closePath", ()),
                ],
            ),
            "big": Glyph(name="big", commands=[("addComponent", ("square", (3, 0, 0, 3, 0, 0)))]),
        }
        pen = AreaPen(glyph_set=glyph_set)
        pen.addComponent("big", (2, 0, 0, 1, 500, 500))
        assert pen.value == pytest.approx(100 * 9 * 2)

    def test_identity_is_passthrough(self) -> None:
        """Test the identity transform leaves points unchanged."""
        direct = RecordingPen()
        draw_sample(direct)

        through = RecordingPen()
        draw_sample(TransformPen(through, Identity))

        assert through.value == direct.value
