"""Drawing surfaces."""

from .base import Surface
from .recording import DrawCommand, FillTextCommand, RecordingSurface, StrokeLineCommand
from .reportlab_surface import ReportLabSurface

__all__ = [
    "Surface",
    "DrawCommand",
    "FillTextCommand",
    "RecordingSurface",
    "StrokeLineCommand",
    "ReportLabSurface",
]
