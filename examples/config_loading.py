"""config_loading.py"""

import sys

from argsmith.config import load_spec
from argsmith.feedback import render_errors, render_help
from argsmith.parser import CommandParser

spec = load_spec("calc.yaml")


def main(argv: list[str]) -> int:
    if not argv or argv[0] not in ("add", "minus"):
        render_help(spec)
        return 2

    command = spec.resolve(argv[:1])
    result = CommandParser(command).parse_args(argv[1:])
    if not result.ok:
        render_errors(result.errors)
        return 1

    if command.name == "add":
        print(sum(result.args["numbers"]))
    else:
        difference = result.args["left"] - result.args["right"]
        print(f"{difference:.{result.opts['precision']}f}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
