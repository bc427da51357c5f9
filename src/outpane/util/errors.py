class RunError(Exception):
    """Base class for all outpane exceptions."""
    pass

class ConfigError(RunError):
    """Configuration related errors."""
    pass

class CommandNotFound(RunError):
    """The external command could not be located or started."""
    def __init__(self, command: str, reason: str = ""):
        self.command = command
        message = f"Command '{command}' not found."
        if reason:
            message = f"Command '{command}' could not be started: {reason}"
        super().__init__(message)

class ExecutionError(RunError):
    """Execution failure."""
    pass

class RenderTargetUnavailable(RunError):
    """The output surface could not be created or selected."""
    def __init__(self, surface_id: str, reason: str):
        self.surface_id = surface_id
        super().__init__(f"Output surface '{surface_id}' unavailable: {reason}")
