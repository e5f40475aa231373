"""Tests for RecordingPen."""

from fontTools.pens.recordingPen import RecordingPen as FontToolsRecordingPen

from glyphpen.core import AreaPen, RecordingPen
from glyphpen.domain import Glyph


class TestRecordingPen:
    """Tests for primitive recording and replay."""

    def test_records_primitives_only(self) -> None:
        """Test multi-point curves are recorded as plain segments."""
        pen = RecordingPen()
        pen.moveTo((0, 0))
        pen.curveTo((10, 10), (20, 10), (30, 10), (40, 0))
        pen.qCurveTo((50, 10), (60, 10), (70, 0))
        pen.closePath()

        ops = [op for op, _ in pen.value]
        assert ops == ["moveTo", "curveTo", "curveTo", "qCurveTo", "qCurveTo", "closePath"]
        assert all(len(args) == 3 for op, args in pen.value if op == "curveTo")
        assert all(len(args) == 2 for op, args in pen.value if op == "qCurveTo")
        assert pen.value[-2] == ("qCurveTo", ((60, 10), (70, 0)))

    def test_end_path_recorded(self) -> None:
        """Test open contours end with endPath."""
        pen = RecordingPen()
        pen.moveTo((0, 0))
        pen.lineTo((10, 0))
        pen.endPath()
        assert pen.value == [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("endPath", ()),
        ]

    def test_replay_onto_other_pen(self) -> None:
        """Test replay draws the recorded commands onto another pen."""
        pen = RecordingPen()
        pen.moveTo((0, 0))
        pen.lineTo((100, 0))
        pen.lineTo((100, 100))
        pen.closePath()

        out = FontToolsRecordingPen()
        pen.replay(out)
        assert out.value == pen.value

        area = AreaPen()
        pen.draw(area)
        assert area.value == 5000.0

    def test_components_drawn_in_place(self) -> None:
        """Test components are recorded as their transformed outline."""
        glyph_set = {
            "dot": Glyph(
                name="dot",
                commands=[
                    ("moveTo", ((0, 0),)),
                    ("lineTo", ((1, 0),)),
                    ("closePath", ()),
                ],
            ),
        }
        pen = RecordingPen(glyph_set=glyph_set)
        pen.addComponent("dot", (10, 0, 0, 10, 5, 5))

        assert pen.value == [
            ("moveTo", ((5, 5),)),
            ("lineTo", ((15, 5),)),
            ("closePath", ()),
        ]

    def test_missing_component_records_nothing(self) -> None:
        """Test a skipped component leaves the recording empty."""
        pen = RecordingPen()
        pen.addComponent("missing", (1, 0, 0, 1, 0, 0))
        assert pen.value == []
