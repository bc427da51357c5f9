import subprocess as spc
import time
from typing import Any, Dict, List, Optional

from outpane.util.config import Config
from outpane.util.output import Printer, Colors
from outpane.util.errors import CommandNotFound, ConfigError, ExecutionError
from outpane.util.security import SecurityManager
from .command import CommandSpec, CaptureResult, DEFAULT_COMMAND, MODE_ARGS

def run(spec: CommandSpec, target_file: str, env: Optional[Dict[str, str]] = None) -> CaptureResult:
    """
    Run spec against target_file and capture its combined output.

    Blocks until the process exits. A non-zero exit is reported through the
    result, never raised.

    Args:
        spec (CommandSpec): Command to execute.
        target_file (str): Path appended as the last argument. Not validated.
        env (Optional[Dict[str, str]]): Environment for the child process.

    Returns:
        CaptureResult: Combined stdout/stderr text and exit code.

    Raises:
        CommandNotFound: If the executable cannot be located or started.
    """
    cmd = spec.argv(target_file)
    try:
        result = spc.run(
            cmd,
            check=False,
            stdout=spc.PIPE,
            stderr=spc.STDOUT,
            stdin=spc.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
    except FileNotFoundError:
        raise CommandNotFound(spec.path) from None
    except OSError as e:
        raise CommandNotFound(spec.path, e.strerror or str(e)) from e

    return CaptureResult(
        combined_output=result.stdout or "",
        exit_code=result.returncode,
        command=tuple(cmd),
    )


class CommandRunner:
    """
    Resolves the external command from configuration and executes it,
    either capturing output for the viewer or streaming it to the terminal.
    """
    def __init__(self, op_flags: Dict[str, Any], config: Optional[Config] = None):
        """
        Initialize the CommandRunner.

        Args:
            op_flags (Dict[str, Any]): Operation flags ('dry_run', 'time').
            config (Optional[Config]): Loaded configuration. Searched for when omitted.
        """
        self.flags = op_flags
        self.dry_run = self.flags.get("dry_run", False)
        self.config = config if config is not None else Config()

    def resolve_spec(self, mode: str, command_override: Optional[str] = None,
                     extra_args: Optional[List[str]] = None) -> CommandSpec:
        """
        Build the CommandSpec for a mode.

        Args:
            mode (str): 'show' or 'run'.
            command_override (Optional[str]): Command path from the CLI.
            extra_args (Optional[List[str]]): Arguments appended after the mode arguments.

        Returns:
            CommandSpec: The resolved command.
        """
        if mode not in MODE_ARGS:
            raise ConfigError(f"Unknown mode: {mode}")

        path = self.config.get_command_path(DEFAULT_COMMAND, command_override)
        args = self.config.get_mode_args(mode)
        if args is None:
            args = list(MODE_ARGS[mode])
        return CommandSpec(path=path, args=tuple(args + list(extra_args or [])))

    def capture(self, spec: CommandSpec, target: str) -> Optional[CaptureResult]:
        """
        Capture the output of spec run against target.

        Returns:
            Optional[CaptureResult]: The result, or None in dry-run mode.
        """
        cmd_str = " ".join(spec.argv(target))

        if self.dry_run:
            Printer.action("DRY-RUN", f"COMPILE: {cmd_str}", Colors.YELLOW)
            return None

        Printer.action("COMPILE", cmd_str)

        start_time = time.perf_counter()
        result = run(spec, target, env=SecurityManager.sanitize_execution_env())

        if self.flags.get("time", False):
            Printer.time(time.perf_counter() - start_time)

        Printer.debug(f"Captured {len(result.combined_output)} chars, exit code {result.exit_code}")
        return result

    def compile_and_run(self, spec: CommandSpec, target: str) -> int:
        """
        Compile and run target, streaming output straight to the terminal.

        Returns:
            int: Exit code, always 0 since failures raise.

        Raises:
            CommandNotFound: If the executable cannot be located or started.
            ExecutionError: If the program exits with a non-zero status.
        """
        cmd = spec.argv(target)
        cmd_str = " ".join(cmd)

        if self.dry_run:
            Printer.action("DRY-RUN", f"RUN: {cmd_str}", Colors.YELLOW)
            return 0

        Printer.action("RUN", cmd_str)
        Printer.separator()

        env = SecurityManager.sanitize_execution_env()
        start_time = time.perf_counter()
        try:
            result = spc.run(cmd, check=False, env=env)
        except FileNotFoundError:
            raise CommandNotFound(spec.path) from None
        except OSError as e:
            raise CommandNotFound(spec.path, e.strerror or str(e)) from e

        if self.flags.get("time", False):
            Printer.time(time.perf_counter() - start_time)

        if result.returncode != 0:
            raise ExecutionError(f"Execution failed with exit code {result.returncode}")
        return result.returncode
