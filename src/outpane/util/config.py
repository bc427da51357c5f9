import tomllib
from typing import List, Optional, Dict, Any
from pathlib import Path
from outpane.util.output import Printer
from outpane.util.errors import ConfigError

CONFIG_NAME = "Outpane.toml"

class Config:
    """Configuration manager for outpane, handling TOML config loading and retrieval."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the Config manager.

        Args:
            config_path (Optional[Path]): Explicit config file. When omitted, Outpane.toml
                is searched from the current directory upwards.
        """
        self.data: Dict[str, Any] = {}
        self.path: Optional[Path] = None

        if config_path is not None:
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_path}")
            self.path = config_path
        else:
            self.path = self._find_config(Path.cwd())

        if self.path:
            try:
                with open(self.path, "rb") as f:
                    self.data = tomllib.load(f)
                Printer.info(f"Loaded config: {self.path}")
            except (OSError, tomllib.TOMLDecodeError) as e:
                Printer.error(f"Failed to parse {self.path}: {e}")
                self.data = {}

            self.validate()

    @staticmethod
    def _find_config(start: Path) -> Optional[Path]:
        """Walk up at most 3 parents from start, stopping at a .git root."""
        current = start
        for _ in range(4):
            target = current / CONFIG_NAME
            if target.exists():
                return target
            if (current / ".git").exists() or current == current.parent:
                break
            current = current.parent
        return None

    def validate(self):
        """
        Validate the loaded configuration.

        Raises:
            ConfigError: If configuration is invalid.
        """
        if not self.data:
            return

        command = self.data.get("command", {})
        if not isinstance(command, dict):
            raise ConfigError("'command' section must be a table")

        if "path" in command:
            path = command["path"]
            if not isinstance(path, str) or not path.strip():
                raise ConfigError("'command.path' must be a non-empty string")

        mode_args = command.get("args", {})
        if not isinstance(mode_args, dict):
            raise ConfigError("'command.args' must be a table of mode = [args]")
        for mode, args in mode_args.items():
            if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
                raise ConfigError(f"'command.args.{mode}' must be a list of strings")

        viewer = self.data.get("viewer", {})
        if not isinstance(viewer, dict):
            raise ConfigError("'viewer' section must be a table")
        if "surface" in viewer:
            surface = viewer["surface"]
            if not isinstance(surface, str) or not surface.strip():
                raise ConfigError("'viewer.surface' must be a non-empty string")

    def get_command_path(self, default: str, override: Optional[str] = None) -> str:
        """
        Get the external command path.

        Args:
            default (str): Built-in command name.
            override (Optional[str]): Value given on the command line, takes precedence.

        Returns:
            str: The command path.
        """
        if override:
            return override
        return self.data.get("command", {}).get("path", default)

    def get_mode_args(self, mode: str) -> Optional[List[str]]:
        """
        Get the configured arguments for a mode ('show' or 'run').

        Returns:
            Optional[List[str]]: Arguments, or None when the mode is not configured.
        """
        args = self.data.get("command", {}).get("args", {}).get(mode)
        return list(args) if args is not None else None

    def get_surface_name(self, default: str, override: Optional[str] = None) -> str:
        """Get the output surface identifier."""
        if override:
            return override
        return self.data.get("viewer", {}).get("surface", default)
