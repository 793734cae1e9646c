#!/usr/bin/env python3
"""
Command line entry point for the SGPA planner.

Reads subjects from a JSON file (a list of subject objects or
``{"subjects": [...]}``), runs one engine operation and prints the result
as JSON on stdout. Logs go to stderr.

Usage:
    sgpa-planner sgpa subjects.json
    sgpa-planner critical --cie 40
    sgpa-planner plan-single subjects.json --code MA101 --target 8.5
    sgpa-planner plan-global subjects.json --target 8.5 --config grading.json

``--config`` and ``--verbose`` are accepted before or after the command.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from sgpa_planner import __version__
from sgpa_planner.core.errors import EngineError
from sgpa_planner.core.utils.serialization import dumps, load_subjects
from sgpa_planner.engine import (
    DEFAULT_GRADING_CONFIG,
    calculate_critical_see_values,
    calculate_sgpa,
    find_minimal_see_for_target,
    greedy_global_plan,
    load_grading_config,
)

logger = logging.getLogger("sgpa_planner")

EXIT_OK = 0
EXIT_INVALID = 2


def _add_common_options(
    parser: argparse.ArgumentParser, default_config: object, default_verbose: object
) -> None:
    parser.add_argument(
        "--config", type=Path, default=default_config,
        help="Grading config JSON (default: 10-point table)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=default_verbose,
        help="Enable debug logging",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sgpa-planner",
        description="Calculate SGPA and plan the exam marks needed to reach a target.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_options(parser, None, False)

    # Subcommand copies leave the namespace alone unless given, so a value
    # passed before the command survives
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, argparse.SUPPRESS, argparse.SUPPRESS)

    sub = parser.add_subparsers(dest="command", required=True)

    p_sgpa = sub.add_parser("sgpa", parents=[common], help="Calculate SGPA with per-subject breakdown")
    p_sgpa.add_argument("subjects", type=Path, help="Subjects JSON file")

    p_crit = sub.add_parser("critical", parents=[common], help="Minimum SEE per grade tier for a CIE score")
    p_crit.add_argument("--cie", type=float, required=True, help="Internal (CIE) marks")

    p_single = sub.add_parser("plan-single", parents=[common], help="Minimal SEE for one subject to reach a target")
    p_single.add_argument("subjects", type=Path, help="Subjects JSON file")
    p_single.add_argument("--code", required=True, help="Subject code to plan for")
    p_single.add_argument("--target", type=float, required=True, help="Target SGPA")

    p_global = sub.add_parser("plan-global", parents=[common], help="Greedy SEE plan across all subjects")
    p_global.add_argument("subjects", type=Path, help="Subjects JSON file")
    p_global.add_argument("--target", type=float, required=True, help="Target SGPA")

    return parser


def run(args: argparse.Namespace) -> object:
    """Dispatch a parsed command and return its result record(s)."""
    config = load_grading_config(args.config) if args.config else DEFAULT_GRADING_CONFIG

    if args.command == "critical":
        return calculate_critical_see_values(args.cie, config)

    subjects = load_subjects(args.subjects)
    logger.debug(f"Loaded {len(subjects)} subjects from {args.subjects}")

    if args.command == "sgpa":
        return calculate_sgpa(subjects, config)
    if args.command == "plan-single":
        return find_minimal_see_for_target(subjects, args.code, args.target, config)
    return greedy_global_plan(subjects, args.target, config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = run(args)
    except EngineError as e:
        field = getattr(e, "field", "")
        logger.error(f"{e}" + (f" (field: {field})" if field else ""))
        return EXIT_INVALID
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read input: {e}")
        return EXIT_INVALID

    print(dumps(result))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
