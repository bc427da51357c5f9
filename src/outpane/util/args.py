from argparse import ArgumentParser, Namespace
from typing import List, Optional
import sys

def args(argv: Optional[List[str]] = None) -> Namespace:
    """
    Parser Argument, recieve argument then parse them, by using argparse lib to manage.

    Args:
        argv (Optional[List[str]]): Arguments without the program name, defaults to sys.argv[1:].

    Return:
        argparse.Namespace
    """

    parser = ArgumentParser(
        prog="outpane",
        description="Run a compiler on a file and show its output in a reusable pane",
    )

    # Target file
    parser.add_argument("file", nargs="?", help="Source file to pass to the compiler")

    # Command selection
    parser.add_argument("-c", "--command", type=str, default=None, help="Compiler path or name (overrides Outpane.toml)")
    parser.add_argument("-a", "--args", type=str, default="", help="Extra arguments appended after the mode arguments")
    parser.add_argument("-s", "--surface", type=str, default=None, help="Name of the output pane")
    parser.add_argument("--config", type=str, default=None, help="Path to an Outpane.toml file")

    # True or False Action
    parser.add_argument("-r", "--run", action="store_true", help="Compile and run, streaming output to the terminal")
    parser.add_argument("-t", "--time", action="store_true", help="Time counter for the compiler invocation")
    parser.add_argument("-d", "--dry-run", action="store_true", help="Simulate execution without running commands")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors (also set by NO_COLOR)")
    parser.add_argument("--unsafe", action="store_true", help="Allow running as root")

    # Handle version checker
    parser.add_argument("--version", action="store_true", help="Show the version and exit")

    raw = list(sys.argv[1:] if argv is None else argv)

    # -a "-O -g" would be read as an option, force it into -a=-O -g
    processed_args = []
    i = 0
    while i < len(raw):
        arg = raw[i]
        if arg in ("-a", "--args") and i + 1 < len(raw) and raw[i + 1].startswith("-"):
            processed_args.append(f"{arg}={raw[i + 1]}")
            i += 1
        else:
            processed_args.append(arg)
        i += 1

    return parser.parse_args(processed_args)
