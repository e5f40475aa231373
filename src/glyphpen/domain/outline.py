"""Outline sources and glyph sets.

An outline is anything that can replay itself onto a pen. This module
defines that protocol plus Glyph, a small in-memory outline that stores
its drawing commands, and the GlyphSet mapping used to resolve components.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from fontTools.misc.transform import Transform

from glyphpen.domain.point import is_implied
from glyphpen.exceptions import UnknownCommandError

# Pen protocol operators, grouped by argument shape
POINT_COMMANDS = frozenset({"moveTo", "lineTo", "curveTo", "qCurveTo"})
BARE_COMMANDS = frozenset({"closePath", "endPath"})
COMPONENT_COMMAND = "addComponent"


@runtime_checkable
class Outline(Protocol):
    """Anything that can draw itself onto a pen."""

    def draw(self, pen: Any) -> None:
        """Replay the outline as pen calls."""
        ...


GlyphSet = Mapping[str, Outline]


@dataclass
class Glyph:
    """An outline stored as a list of pen commands.

    Each command is an ``(operator, args)`` pair where operator is a pen
    method name and args its positional arguments, the same shape a
    RecordingPen produces.

    Attributes:
        name: Glyph name (e.g., "A", "Aacute")
        commands: Drawing commands in replay order
    """

    name: str
    commands: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        for operator, _ in self.commands:
            _check_operator(operator)

    def draw(self, pen: Any) -> None:
        """Replay the stored commands onto a pen.

        Args:
            pen: Any object implementing the pen protocol
        """
        for operator, args in self.commands:
            getattr(pen, operator)(*args)

    def is_empty(self) -> bool:
        """Check if glyph has no drawing commands."""
        return len(self.commands) == 0

    def is_composite(self) -> bool:
        """Check if glyph references other glyphs as components."""
        return any(operator == COMPONENT_COMMAND for operator, _ in self.commands)

    def component_names(self) -> list[str]:
        """Names of the glyphs this glyph references, in drawing order."""
        return [args[0] for operator, args in self.commands if operator == COMPONENT_COMMAND]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Points become ``[x, y]`` lists, implied on-curve points become None
        and component transforms become 6-item lists.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "name": self.name,
            "commands": [_command_to_dict(op, args) for op, args in self.commands],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance

        Raises:
            UnknownCommandError: If a command is not part of the pen protocol
        """
        commands = [_command_from_dict(c) for c in data["commands"]]
        return cls(name=data["name"], commands=commands)


def _check_operator(operator: str) -> None:
    if (
        operator not in POINT_COMMANDS
        and operator not in BARE_COMMANDS
        and operator != COMPONENT_COMMAND
    ):
        raise UnknownCommandError(operator)


def _command_to_dict(operator: str, args: tuple[Any, ...]) -> dict[str, Any]:
    if operator == COMPONENT_COMMAND:
        glyph_name, transformation = args
        return {"op": operator, "glyph": glyph_name, "transform": list(transformation)}
    points = [None if is_implied(p) else [p[0], p[1]] for p in args]
    return {"op": operator, "points": points}


def _command_from_dict(data: dict[str, Any]) -> tuple[str, tuple[Any, ...]]:
    operator = data["op"]
    _check_operator(operator)
    if operator == COMPONENT_COMMAND:
        return operator, (data["glyph"], Transform(*data["transform"]))
    points = tuple(None if p is None else (p[0], p[1]) for p in data.get("points", []))
    return operator, points
