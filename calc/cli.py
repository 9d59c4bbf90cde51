from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from .calculator import Calculator, get_version
from .config import load_config, make_calculator
from .errors import CalcUserError, StepError
from .logs import LOG_LEVELS, setup_logging
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="calc",
        description="32-bit integer calculator with a pluggable collaborator",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--root",
        type=Path,
        default=None,
        help="directory holding calc.yaml (default: current directory)",
    )
    p.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="override log_level from calc.yaml",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_operands(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("a", type=int)
        sp.add_argument("b", type=int)

    add_operands(sub.add_parser("add", help="print a + b"))
    add_operands(sub.add_parser("multiply", help="print a * b"))
    sub.add_parser("version", help="print the calculator version string")
    sub.add_parser("holder", help="print what the configured holder reports")

    sp_fmt = sub.add_parser("format", help="print 'PREFIX: <last result>'")
    sp_fmt.add_argument("prefix")
    op = sp_fmt.add_mutually_exclusive_group()
    op.add_argument("--add", nargs=2, type=int, metavar=("A", "B"))
    op.add_argument("--multiply", nargs=2, type=int, metavar=("A", "B"))

    sp_run = sub.add_parser("run", help="run steps on one calculator, print JSON")
    sp_run.add_argument(
        "steps",
        nargs="+",
        metavar="STEP",
        help="add:A,B | multiply:A,B | last | format:PREFIX | version | holder",
    )
    return p


def _parse_operands(step: str, raw: str) -> List[int]:
    parts = [s.strip() for s in raw.split(",")]
    if len(parts) != 2:
        raise StepError(f"Invalid step '{step}'. Expected two comma-separated integers")
    try:
        return [int(x) for x in parts]
    except ValueError:
        raise StepError(f"Invalid step '{step}'. Operands must be integers")


def _run_step(calc: Calculator, step: str) -> Dict[str, Any]:
    name, sep, raw = step.partition(":")
    name = name.strip()

    if name in ("add", "multiply"):
        if not sep:
            raise StepError(f"Invalid step '{step}'. Expected '{name}:A,B'")
        a, b = _parse_operands(step, raw)
        result: Any = calc.add(a, b) if name == "add" else calc.multiply(a, b)
        return {"op": name, "args": [a, b], "result": result}

    if name == "format":
        if not sep:
            raise StepError(f"Invalid step '{step}'. Expected 'format:PREFIX'")
        return {"op": name, "args": [raw], "result": calc.format_result(raw)}

    no_args = {
        "last": calc.get_last_result,
        "version": calc.get_version,
        "holder": calc.data_holder_test,
    }
    if name not in no_args:
        raise StepError(f"Unknown step '{name}'")
    if sep:
        raise StepError(f"Step '{name}' takes no arguments")
    return {"op": name, "args": [], "result": no_args[name]()}


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    try:
        if ns.cmd == "version":
            sys.stdout.write(get_version() + "\n")
            return 0

        root = ns.root or Path.cwd()
        cfg = load_config(root)
        setup_logging(ns.log_level or cfg.log_level)
        calc = make_calculator(root, cfg)

        if ns.cmd == "add":
            out: Any = calc.add(ns.a, ns.b)
        elif ns.cmd == "multiply":
            out = calc.multiply(ns.a, ns.b)
        elif ns.cmd == "holder":
            out = calc.data_holder_test()
        elif ns.cmd == "format":
            if ns.add:
                calc.add(*ns.add)
            elif ns.multiply:
                calc.multiply(*ns.multiply)
            out = calc.format_result(ns.prefix)
        elif ns.cmd == "run":
            results = [_run_step(calc, s) for s in ns.steps]
            sys.stdout.write(json.dumps(results, ensure_ascii=False, indent=2) + "\n")
            return 0
        else:
            raise ValueError(f"Unknown command: {ns.cmd}")

        sys.stdout.write(f"{out}\n")
        return 0

    except CalcUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
