from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from prime_sieve.config.loader import ConfigError, load_default_yaml, load_yaml_config, parse_config
from prime_sieve.config.models import SieveConfig
from prime_sieve.domain.errors import PipelineError
from prime_sieve.kernel.driver import run_pipeline

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime-sieve",
        description="Concurrent prime sieve: one filter stage per prime, linked by streams",
    )
    parser.add_argument("--config", help="Path to YAML config (defaults to the packaged config)")
    parser.add_argument("--limit", type=int, help="Largest candidate fed into the pipeline")
    parser.add_argument(
        "--runtime",
        choices=["process", "thread"],
        help="Run stages as processes or threads",
    )
    parser.add_argument("--output", help="Write prime lines to this file instead of stdout")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Enable lifecycle logging at this level",
    )
    parser.add_argument("--log-path", help="Write lifecycle logs as JSONL to this file")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_cli_overrides(raw: dict[str, Any], args: argparse.Namespace) -> None:
    # CLI flags take precedence over config values; validation happens afterwards.
    if args.limit is not None:
        raw["limit"] = args.limit
    if args.runtime is not None:
        runtime = _section(raw, "runtime")
        runtime["kind"] = args.runtime
    if args.output is not None:
        output = _section(raw, "output")
        output["kind"] = "file"
        output["path"] = args.output
    if args.log_level is not None or args.log_path is not None:
        logging = _section(raw, "logging")
        logging["enabled"] = True
        if args.log_level is not None:
            logging["level"] = args.log_level
        if args.log_path is not None:
            logging["sink"] = "jsonl"
            logging["path"] = args.log_path


def resolve_config(args: argparse.Namespace) -> SieveConfig:
    raw = load_yaml_config(Path(args.config)) if args.config else load_default_yaml()
    apply_cli_overrides(raw, args)
    return parse_config(raw)


def run(argv: Sequence[str] | None = None) -> int:
    # Thin orchestration wrapper; pipeline semantics live in the kernel.
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"prime-sieve: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        report = run_pipeline(config)
    except (PipelineError, OSError) as exc:
        print(f"prime-sieve: {exc}", file=sys.stderr)
        return EXIT_FAILED
    return EXIT_OK if report.ok else EXIT_FAILED


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.setdefault(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping")
    return section
