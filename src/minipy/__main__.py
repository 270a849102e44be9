import argparse
import sys
from pathlib import Path

from .main import Interpreter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m minipy",
        usage="python -m minipy <script.py>",
        description="Evaluate a program written in the minipy Python subset.",
    )
    parser.add_argument("script")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args_list = sys.argv[1:] if argv is None else argv
    try:
        args = parser.parse_args(args_list)
    except SystemExit as exc:
        return int(exc.code)

    script_path = Path(args.script).resolve()
    if not script_path.is_file():
        print(f"minipy: script not found: {script_path}", file=sys.stderr)
        return 2

    source = script_path.read_text()
    result = Interpreter().run(source, filename=str(script_path))
    if result.exception is not None:
        print(f"minipy: {result.exception.describe()}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
