from dataclasses import dataclass, field
from typing import List, Tuple

from outpane.util.errors import ConfigError

DEFAULT_COMMAND = "potion"

# Built-in arguments per mode, used when Outpane.toml does not set them
MODE_ARGS = {
    "show": ["-c", "-V"],
    "run": [],
}

@dataclass(frozen=True)
class CommandSpec:
    """
    External command to invoke against a target file.

    Attributes:
        path: Executable name (resolved through PATH) or absolute path.
        args: Arguments placed between the executable and the target file.
    """
    path: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.path or not self.path.strip():
            raise ConfigError("Command path must not be empty")
        object.__setattr__(self, "args", tuple(self.args))

    def argv(self, target_file: str) -> List[str]:
        """Full argument vector for the given target file."""
        return [self.path, *self.args, str(target_file)]


@dataclass(frozen=True)
class CaptureResult:
    """
    Output of one captured process run.

    Attributes:
        combined_output: Interleaved stdout and stderr text.
        exit_code: Process exit status.
        command: Argument vector that produced this result.
    """
    combined_output: str
    exit_code: int
    command: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "command", tuple(self.command))

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
