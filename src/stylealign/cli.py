"""CLI entry point: ``stylealign compare``, ``analyze``, ``verify``."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from stylealign import __version__
from stylealign.analysis.sample_style import analyze_sample_style
from stylealign.analysis.structured import build_structured_comparison
from stylealign.analysis.text_metrics import analyze_text
from stylealign.analysis.transformation import (
    compare_style_transformation,
)
from stylealign.analysis.verification import verify_style_match
from stylealign.config import Settings
from stylealign.logging_config import setup_logging


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"stylealign {__version__}")
        return

    setup_logging(
        "DEBUG" if args.verbose else Settings().effective_log_level
    )

    if args.command == "compare":
        _run_compare(args)
    elif args.command == "analyze":
        _run_analyze(args)
    elif args.command == "verify":
        _run_verify(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stylealign",
        description=(
            "Measure how closely a rewrite matches the style "
            "of a writing sample."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command")

    compare = sub.add_parser(
        "compare",
        help="Compare a rewrite against a writing sample",
    )
    compare.add_argument("sample", help="Path to the writing sample")
    compare.add_argument("original", help="Path to the original text")
    compare.add_argument(
        "paraphrased", help="Path to the rewritten text"
    )
    compare.add_argument(
        "--structured",
        action="store_true",
        help="Emit grouped metrics instead of comparison rows",
    )

    analyze = sub.add_parser(
        "analyze",
        help="Print style metrics for a single text",
    )
    analyze.add_argument("path", help="Path to the text file")

    verify = sub.add_parser(
        "verify",
        help="Check an output text against a writing sample",
    )
    verify.add_argument("output", help="Path to the output text")
    verify.add_argument(
        "--sample",
        default=None,
        help="Path to the writing sample (default: no style)",
    )

    return parser


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read {path}: {exc}", file=sys.stderr)
        sys.exit(1)


def _emit(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))


def _run_compare(args: argparse.Namespace) -> None:
    """Execute the compare command."""
    transformation = compare_style_transformation(
        _read_text(args.sample),
        _read_text(args.original),
        _read_text(args.paraphrased),
    )
    if args.structured:
        structured = build_structured_comparison(
            transformation.user_style,
            transformation.original_analysis,
            transformation.paraphrased_analysis,
        )
        _emit(structured.model_dump(mode="json"))
        return
    _emit(transformation.to_dict())


def _run_analyze(args: argparse.Namespace) -> None:
    """Execute the analyze command."""
    text = _read_text(args.path)
    _emit({
        "analysis": analyze_text(text).to_dict(),
        "style": analyze_sample_style(text).to_dict(),
    })


def _run_verify(args: argparse.Namespace) -> None:
    """Execute the verify command."""
    output = _read_text(args.output)
    style = (
        analyze_sample_style(_read_text(args.sample))
        if args.sample
        else None
    )
    _emit(verify_style_match(output, style).to_dict())
