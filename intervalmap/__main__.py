"""CLI entry point for replaying scripts and fuzzing interval maps."""

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from intervalmap.display import (
    display_breakpoints,
    display_check_result,
    display_differences,
    display_error,
    display_fuzz_report,
    display_lookups,
    display_spinner_context,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with replay and fuzz subcommands.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="intervalmap")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every operation at debug level",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    replay_parser = subcommands.add_parser("replay")
    replay_parser.add_argument("script_path")
    replay_parser.add_argument(
        "--probe", type=int, action="append", default=[],
        help="Extra key to look up after replaying (repeatable)",
    )

    fuzz_parser = subcommands.add_parser("fuzz")
    fuzz_parser.add_argument("--seed", type=int, help="Random seed")
    fuzz_parser.add_argument("--rounds", type=int, help="Number of random assigns")
    fuzz_parser.add_argument("--key-min", type=int, help="Smallest random key")
    fuzz_parser.add_argument("--key-max", type=int, help="Largest random key")
    return parser


def run_replay(script_path: Path, probes: list[int]) -> None:
    """Replay a YAML script and display the resulting map.

    Args:
        script_path: Path to the replay script.
        probes: Extra keys to look up.
    """
    from intervalmap.checks import check_canonical
    from intervalmap.script import (
        compare_expected,
        parse_script,
        probe_lookups,
        replay_script,
    )

    if not script_path.exists():
        display_error(f"Script file not found: {script_path}")
        raise SystemExit(1)

    try:
        script = parse_script(script_path)
        imap = replay_script(script)
        lookups = probe_lookups(imap, script, probes)
    except (ValueError, ValidationError) as exc:
        display_error(str(exc))
        raise SystemExit(1) from exc

    display_breakpoints(imap, title=script.name)
    display_lookups(lookups)
    result = check_canonical(imap)
    display_check_result(result)
    differences = compare_expected(imap, script)
    if script.expected is not None:
        display_differences(differences)
    if not result.passed or differences:
        raise SystemExit(1)


def run_fuzz_command(overrides: dict) -> None:
    """Run a randomized differential check and display its report.

    Args:
        overrides: Settings given on the command line; ``None`` entries
            fall back to the environment and defaults.
    """
    from intervalmap.config import FuzzConfig
    from intervalmap.fuzz import run_fuzz

    try:
        config = FuzzConfig(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        display_error(str(exc))
        raise SystemExit(1) from exc

    with display_spinner_context(f"Running {config.rounds} rounds..."):
        report = run_fuzz(config)
    display_fuzz_report(report)
    if not report.passed:
        raise SystemExit(1)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args and dispatch to replay or fuzz behavior.

    Args:
        argv: Optional argument vector for testing.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "replay":
        run_replay(Path(args.script_path), args.probe)
    elif args.command == "fuzz":
        run_fuzz_command(
            {
                "seed": args.seed,
                "rounds": args.rounds,
                "key_min": args.key_min,
                "key_max": args.key_max,
            }
        )


if __name__ == "__main__":
    main()
