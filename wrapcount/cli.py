import argparse
import json
import sys
from dataclasses import replace

from wrapcount.check import verify
from wrapcount.config import VerifyConfig
from wrapcount.errors import Err, Ok
from wrapcount.render import render_contracts
from wrapcount.report import format_report, report_json
from wrapcount.serialization import dumps
from wrapcount.theorems import counter_spec


def handle_verify(config: VerifyConfig, *, as_json: bool) -> int:
    """Check every contract and axiom, print the report, return the exit code."""
    report = verify(config)
    if as_json:
        print(json.dumps(report_json(report), indent=2, ensure_ascii=False))
    else:
        print(format_report(report))
    return 0 if report.passed else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrapcount",
        description="Verification harness for the 32-bit wrapping counter",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    verify_parser = subparsers.add_parser(
        "verify",
        help="Check every operation contract and every axiom of the counter theory.",
    )
    verify_parser.add_argument(
        "--samples",
        type=int,
        help="Random assignments per axiom and contract (default: WRAPCOUNT_SAMPLES or 256).",
    )
    verify_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for random sampling (default: WRAPCOUNT_SEED or 0).",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print a machine-readable report.",
    )

    subparsers.add_parser(
        "contracts",
        help="Print the contract sheet (Markdown).",
    )
    subparsers.add_parser(
        "spec",
        help="Print the counter theory as JSON.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match VerifyConfig.from_env():
        case Ok(config):
            pass
        case Err(e):
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 2
    config.configure_logging()

    match args.command:
        case "verify":
            if args.samples is not None:
                if args.samples < 0:
                    parser.error("--samples must be non-negative")
                config = replace(config, samples=args.samples)
            if args.seed is not None:
                config = replace(config, seed=args.seed)
            return handle_verify(config, as_json=args.json)
        case "contracts":
            sys.stdout.write(render_contracts())
            return 0
        case "spec":
            print(dumps(counter_spec()))
            return 0
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


if __name__ == "__main__":
    sys.exit(main())
