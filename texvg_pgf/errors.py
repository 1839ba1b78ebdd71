from __future__ import annotations


class TexCanvasError(RuntimeError):
    """Base class for failures raised by the PGF canvas."""


class UnsupportedPathComponentError(TexCanvasError, ValueError):
    def __init__(self, kind: object) -> None:
        super().__init__(f"unknown path component type: {kind!r}")
        self.kind = kind


class ScopeUnderflowError(TexCanvasError, IndexError):
    def __init__(self) -> None:
        super().__init__("pop without a matching push: only the base context is left")


class TexWriteError(TexCanvasError, OSError):
    """The output sink failed part way through a flush."""

    def __init__(self, bytes_written: int, cause: BaseException) -> None:
        super().__init__(f"write failed after {bytes_written} bytes: {cause}")
        self.bytes_written = bytes_written
