import os
from typing import Dict
from outpane.util.output import Printer
from outpane.util.errors import ConfigError

class SecurityManager:
    """Security checks applied before an external compiler is spawned."""

    @staticmethod
    def check_root(allow_root: bool = False):
        """Refuse to run as root/admin unless explicitly allowed."""
        is_root = False
        try:
            if hasattr(os, 'geteuid'):
                is_root = os.geteuid() == 0
            elif os.name == 'nt':
                import ctypes
                is_root = ctypes.windll.shell32.IsUserAnAdmin() != 0
        except (AttributeError, OSError):
            # Cannot determine privileges on this platform
            is_root = False

        if is_root:
            msg = "Running as root/administrator is dangerous when invoking arbitrary compilers."
            if allow_root:
                Printer.warning(f"{msg} Proceeding due to --unsafe.")
            else:
                raise ConfigError(f"{msg} Use --unsafe to override.")

    @staticmethod
    def sanitize_execution_env() -> Dict[str, str]:
        """
        Return a sanitized environment dictionary for subprocess execution.

        Returns:
            Dict[str, str]: Copy of os.environ with LD_PRELOAD removed.
        """
        env = os.environ.copy()
        env.pop("LD_PRELOAD", None)
        return env
