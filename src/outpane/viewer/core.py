from typing import Callable, Dict, List, Optional

from outpane.runner.command import CaptureResult
from outpane.util.output import Printer
from outpane.util.errors import RenderTargetUnavailable
from .surface import OutputSurface

def split_lines(text: str) -> List[str]:
    """
    Split captured output on newlines.

    A single empty segment after a final newline is dropped. Carriage returns
    are left in place.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Viewer:
    """
    Renders capture results into named output surfaces.

    A surface is created on the first render for its name and reused for every
    later render while it stays open. Each render fully replaces its content.
    """
    def __init__(self, display: Optional[Callable[[OutputSurface], None]] = None,
                 max_surfaces: Optional[int] = None):
        """
        Args:
            display: Called with the surface after each render to show it to the user.
            max_surfaces: Limit on simultaneously open surfaces, None for no limit.
        """
        self.display = display
        self.max_surfaces = max_surfaces
        self._surfaces: Dict[str, OutputSurface] = {}

    def get(self, surface_id: str) -> Optional[OutputSurface]:
        """Return the open surface named surface_id, if any."""
        surface = self._surfaces.get(surface_id)
        if surface is not None and not surface.is_open:
            del self._surfaces[surface_id]
            return None
        return surface

    def close(self, surface_id: str):
        """Close the surface named surface_id. The next render recreates it."""
        surface = self._surfaces.pop(surface_id, None)
        if surface is not None:
            surface.close()

    def _acquire(self, surface_id: str) -> OutputSurface:
        if not surface_id or not surface_id.strip():
            raise RenderTargetUnavailable(surface_id, "surface name must not be empty")

        surface = self.get(surface_id)
        if surface is not None:
            return surface

        open_count = sum(1 for s in self._surfaces.values() if s.is_open)
        if self.max_surfaces is not None and open_count >= self.max_surfaces:
            raise RenderTargetUnavailable(surface_id, f"limit of {self.max_surfaces} open surfaces reached")

        Printer.debug(f"Creating output surface '{surface_id}'")
        surface = OutputSurface(surface_id)
        self._surfaces[surface_id] = surface
        return surface

    def render(self, surface_id: str, output: CaptureResult) -> OutputSurface:
        """
        Replace the content of surface_id with the lines of output.

        Args:
            surface_id (str): Stable surface name.
            output (CaptureResult): Captured command output.

        Returns:
            OutputSurface: The surface that now holds the output.

        Raises:
            RenderTargetUnavailable: If the surface cannot be created, selected or shown.
        """
        surface = self._acquire(surface_id)
        surface.replace(split_lines(output.combined_output))

        if not output.succeeded:
            surface.status = f"Compilation failed with exit code {output.exit_code}"
            Printer.error(surface.status)

        if self.display is not None:
            try:
                self.display(surface)
            except OSError as e:
                raise RenderTargetUnavailable(surface_id, str(e)) from e

        return surface
