#!/usr/bin/env python3

import sys
import shlex
from pathlib import Path
from typing import List, Optional

from outpane.util.args import args as parse_args
from outpane.util.output import Printer, Colors, set_debug
from outpane.util.errors import RunError
from outpane.util.config import Config
from outpane.util.security import SecurityManager
from outpane.util.version import version
from outpane.runner import CommandRunner
from outpane.viewer import Viewer, TerminalDisplay

DEFAULT_SURFACE = "__Potion_Bytecode__"

def main(argv: Optional[List[str]] = None, viewer: Optional[Viewer] = None) -> int:
    args = parse_args(argv)

    if args.version:
        Printer.info(f"Currently: {version() or 'unknown'}")
        return 0

    if args.no_color:
        Colors.disable()
    if args.debug:
        set_debug()
        Printer.debug("Debug logging enabled")

    try:
        SecurityManager.check_root(allow_root=args.unsafe)

        config = Config(Path(args.config)) if args.config else Config()
        runner = CommandRunner(op_flags={"dry_run": args.dry_run, "time": args.time}, config=config)

        target = args.file
        if not target:
            try:
                print(Colors.paint("[ INPUT ] No file given, enter file name: ", Colors.YELLOW), end="")
                target = input().strip()
            except (EOFError, KeyboardInterrupt):
                return 1
            if not target:
                return 1

        # The file is read from disk as-is; unsaved editor buffers must be written first
        if not Path(target).exists():
            Printer.warning(f"{target} does not exist, the compiler will report it")

        mode = "run" if args.run else "show"
        extra = shlex.split(args.args) if args.args else []
        spec = runner.resolve_spec(mode, command_override=args.command, extra_args=extra)
        Printer.debug(f"Mode '{mode}' resolved to {spec.argv(target)}")

        if mode == "run":
            return runner.compile_and_run(spec, target)

        result = runner.capture(spec, target)
        if result is None:
            return 0

        if viewer is None:
            viewer = Viewer(display=TerminalDisplay())
        surface_id = config.get_surface_name(DEFAULT_SURFACE, args.surface)
        viewer.render(surface_id, result)

        if not result.succeeded:
            return result.exit_code if result.exit_code > 0 else 1
        return 0

    except RunError as e:
        Printer.error(str(e))
        return 1
    except Exception as e:
        Printer.error(f"Unexpected error: {e}")
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1

def cli():
    sys.exit(main())

if __name__ == "__main__":
    cli()
