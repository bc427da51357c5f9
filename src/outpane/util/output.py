import logging
import os
import sys

class Colors:
    """ANSI color codes for terminal output. Honors the NO_COLOR convention."""
    GREEN = '\033[92m'
    CYAN = '\033[96m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GRAY = '\033[1;30m'
    RESET = '\033[0m'
    BOLD = '\033[1m'

    enabled = "NO_COLOR" not in os.environ

    @classmethod
    def paint(cls, text: str, *codes: str) -> str:
        """Wrap text in the given codes, or return it untouched when colors are off."""
        if not cls.enabled or not codes:
            return text
        return f"{''.join(codes)}{text}{cls.RESET}"

    @classmethod
    def disable(cls):
        cls.enabled = False

class TaggedFormatter(logging.Formatter):
    """Formatter rendering records as `[ TAG ] message`."""

    TAGS = {
        logging.DEBUG: ("DEBUG", Colors.GRAY),
        logging.INFO: ("INFO", Colors.CYAN),
        logging.WARNING: ("WARN", Colors.YELLOW),
        logging.ERROR: ("ERROR", Colors.RED),
        logging.CRITICAL: ("CRIT", Colors.RED),
    }

    def format(self, record):
        # extra={'tag': ..., 'color': ...} overrides the level tag
        tag, color = self.TAGS.get(record.levelno, ("LOG", Colors.RESET))
        tag = getattr(record, 'tag', tag)
        color = getattr(record, 'color', color)

        message = super().format(record)
        return f"{Colors.paint(f'[ {tag} ]', Colors.BOLD, color)} {message}"

logger = logging.getLogger("outpane")
logger.setLevel(logging.INFO)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(TaggedFormatter())
    logger.addHandler(handler)

def set_debug(enabled: bool = True):
    """Switch the outpane logger between DEBUG and INFO."""
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)

class Printer:
    """Utility class wrapper for logging."""
    @staticmethod
    def action(tag: str, message: str, color: str = Colors.GREEN):
        """Print an action with a tagged prefix, e.g. [ COMPILE ]."""
        logger.info(message, extra={'tag': tag, 'color': color})

    @staticmethod
    def time(seconds: float):
        print(Colors.paint(f"  -> Took {seconds:.3f}s", Colors.GRAY))

    @staticmethod
    def error(message: str):
        logger.error(message)

    @staticmethod
    def info(message: str):
        logger.info(message)

    @staticmethod
    def warning(message: str):
        logger.warning(message)

    @staticmethod
    def debug(message: str):
        """Print debug message (only with --debug)."""
        logger.debug(message)

    @staticmethod
    def separator():
        print("\n" + Colors.paint('-' * 30, Colors.GRAY) + "\n")
