class DiagramError(ValueError):
    """Raised when a diagram or render configuration cannot be drawn."""


class DanglingReferenceError(DiagramError):
    """An edge names a node that is not in the node table."""

    def __init__(self, source: str, target: str, missing: str):
        self.source = source
        self.target = target
        self.missing = missing
        super().__init__(f'Edge {source!r} -> {target!r} references unknown node {missing!r}')


class DegenerateGeometryError(DiagramError):
    """Two points that must differ coincide (zero-length chord, target on centre)."""
