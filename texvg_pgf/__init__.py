from .canvas import Context, TexCanvas
from .document import DocumentTemplate
from .errors import ScopeUnderflowError, TexCanvasError, TexWriteError, UnsupportedPathComponentError
from .format import fmt_num

__all__ = [
    "Context",
    "DocumentTemplate",
    "ScopeUnderflowError",
    "TexCanvas",
    "TexCanvasError",
    "TexWriteError",
    "UnsupportedPathComponentError",
    "fmt_num",
]
