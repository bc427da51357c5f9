from .command import CommandSpec, CaptureResult, DEFAULT_COMMAND, MODE_ARGS
from .core import CommandRunner, run
