import sys
from typing import TextIO, Optional

from outpane.util.output import Colors
from .surface import OutputSurface

class TerminalDisplay:
    """Shows an output surface on a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.color = Colors.enabled if color is None else color

    def _paint(self, text: str, *codes: str) -> str:
        return Colors.paint(text, *codes) if self.color else text

    def __call__(self, surface: OutputSurface):
        write = self.stream.write
        write(self._paint(f"== {surface.identifier} ==", Colors.BOLD, Colors.CYAN) + "\n")
        write(self._paint("-" * 30, Colors.GRAY) + "\n")
        for line in surface.lines:
            write(line + "\n")
        if surface.status:
            write(self._paint(f"!! {surface.status}", Colors.BOLD, Colors.RED) + "\n")
        self.stream.flush()
