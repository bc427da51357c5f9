import tomllib
from importlib import metadata
from pathlib import Path
from typing import Optional

from outpane.util.output import Printer

fp = Path(__file__).resolve().parents[3] / "pyproject.toml"

def version(file_path: Optional[Path] = None) -> Optional[str]:
    """
    Read the version in pyproject.toml, falling back to the installed
    distribution metadata when running from site-packages.

    Args:
        file_path (Optional[Path]): path to file, the source checkout's pyproject.toml by default
    Returns:
        Optional[str]: project version, None if neither source is available
    """
    path = file_path if file_path is not None else fp
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
            found = data.get("project", {}).get("version")
            if found:
                return found

    except FileNotFoundError:
        Printer.debug(f"Not found {str(path)}, using installed package metadata")
    except tomllib.TOMLDecodeError as e:
        Printer.error(f"Error reading version from {path}: {e}")

    try:
        return metadata.version("outpane")
    except metadata.PackageNotFoundError:
        Printer.warning("outpane is not installed, version unknown")
        return None
