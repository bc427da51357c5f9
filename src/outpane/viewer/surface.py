from typing import Iterable, List, Optional

class OutputSurface:
    """
    A reusable, non-persistent text pane identified by a stable name.

    Content is only ever held in memory; nothing here writes to disk.
    """
    persistent = False

    def __init__(self, identifier: str):
        self.identifier = identifier
        self.lines: List[str] = []
        self.status: Optional[str] = None
        self.is_open = True

    def clear(self):
        """Remove all lines and any status message."""
        self.lines = []
        self.status = None

    def replace(self, lines: Iterable[str]):
        """Clear the surface, then hold exactly the given lines."""
        self.clear()
        self.lines = list(lines)

    def close(self):
        """Mark the surface closed, as when the user dismisses the pane."""
        self.is_open = False

    def __repr__(self):
        state = "open" if self.is_open else "closed"
        return f"OutputSurface({self.identifier!r}, {len(self.lines)} lines, {state})"
