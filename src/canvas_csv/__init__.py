"""Convert .canvas graph documents into semicolon-separated edge lists."""

from .config import __version__
from .converter import convert, convert_bytes

__all__ = ["__version__", "convert", "convert_bytes"]
