"""Exception hierarchy for Glyphpen."""


class GlyphpenError(Exception):
    """Base exception for all Glyphpen errors."""

    pass


class PenError(GlyphpenError):
    """A pen received a drawing command that breaks the pen contract."""

    pass


class PrimitiveNotImplementedError(PenError, NotImplementedError):
    """A primitive drawing hook was not supplied by the concrete pen."""

    def __init__(self, hook_name: str) -> None:
        self.hook_name = hook_name
        super().__init__(f"Pen does not implement '{hook_name}'")


class MissingCurrentPointError(PenError):
    """A line or curve was drawn before any moveTo."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"'{operation}' requires a current point; call moveTo first")


class SegmentError(PenError):
    """A segment has an invalid number or arrangement of points."""

    pass


class NoPointsError(SegmentError):
    """A curve call received no points at all."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"'{operation}' called without points")


class NotEnoughPointsError(SegmentError):
    """A decomposer received fewer points than its minimum arity."""

    def __init__(self, operation: str, minimum: int, received: int) -> None:
        self.operation = operation
        self.minimum = minimum
        self.received = received
        super().__init__(
            f"'{operation}' needs at least {minimum} points, got {received}"
        )


class LastOrFirstOffCurveIsNoneError(SegmentError):
    """A quadratic run with an implied on-curve point lacks usable off-curves."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot resolve implied on-curve point: {reason}")


class InvalidPointError(PenError):
    """A coordinate is not a finite (x, y) pair."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid point: {value!r}")


class MissingComponentError(PenError):
    """addComponent referenced a glyph that is not in the glyph set."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Component glyph '{glyph_name}' not found in glyph set")


class ComponentCycleError(PenError):
    """A glyph references itself, directly or through other components."""

    def __init__(self, chain: list[str]) -> None:
        self.chain = chain
        self.glyph_name = chain[-1]
        super().__init__(f"Component cycle: {' -> '.join(chain)}")


class MissingPrevPointError(PenError):
    """A measuring pen needs a previous point that was never set."""

    def __init__(self) -> None:
        super().__init__("No previous point; the subpath was never started")


class OpenContourError(PenError):
    """A subpath ended away from its start point."""

    def __init__(self) -> None:
        super().__init__("Contour ended without returning to its start point")


class UnknownCommandError(GlyphpenError):
    """A stored outline contains a command the pen protocol does not know."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Unknown drawing command '{operator}'")


class FontError(GlyphpenError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
