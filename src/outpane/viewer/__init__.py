from .surface import OutputSurface
from .core import Viewer, split_lines
from .terminal import TerminalDisplay
