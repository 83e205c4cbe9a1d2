"""Command-line interface for mutant_detector."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Sequence

from tqdm import tqdm

from mutant_detector.errors import InternalFailure, InvalidInput
from mutant_detector.service.gateway import AnalysisCacheGateway
from mutant_detector.service.stats import AggregateCounter
from mutant_detector.utils.config import ServiceConfig
from mutant_detector.utils.logger_config import setup_logger

EXIT_MUTANT = 0
EXIT_HUMAN = 1
EXIT_INVALID = 2
EXIT_INTERNAL = 3

logger = logging.getLogger(__name__)


def load_config(args: argparse.Namespace) -> ServiceConfig:
    """Build configuration from --config, the environment and --db/--log-level."""
    base = ServiceConfig.from_json(args.config) if args.config else None
    config = ServiceConfig.from_env(base=base)

    if args.db:
        config = replace(config, database_path=args.db)
    if args.log_level:
        config = replace(config, log_level=args.log_level)

    return config


def _extract_dna(item: Any) -> Any:
    """Accept either a bare list of rows or a {"dna": [...]} object."""
    if isinstance(item, dict):
        return item.get("dna")
    return item


def _read_json(path: str | Path) -> Any:
    with open(path) as f:
        return json.load(f)


def cmd_classify(args: argparse.Namespace, config: ServiceConfig) -> int:
    """Classify a single DNA grid."""
    dna = _extract_dna(_read_json(args.file)) if args.file else args.rows

    with config.create_store() as store:
        gateway = AnalysisCacheGateway(store, algorithm=config.digest_algorithm)
        mutant = gateway.classify(dna)

    print("MUTANT" if mutant else "HUMAN")
    return EXIT_MUTANT if mutant else EXIT_HUMAN


def cmd_stats(args: argparse.Namespace, config: ServiceConfig) -> int:
    """Print mutant/human totals."""
    with config.create_store() as store:
        report = AggregateCounter(store).stats()

    print(json.dumps(report.to_dict(), indent=2 if args.pretty else None))
    return 0


def cmd_batch(args: argparse.Namespace, config: ServiceConfig) -> int:
    """Classify every grid in a JSON file."""
    items = _read_json(args.file)
    if isinstance(items, dict):
        items = [items]
    if not isinstance(items, list):
        raise InvalidInput(f"{args.file} must hold a JSON list of DNA grids", reason="type")

    results: List[dict] = []
    counts = {"mutant": 0, "human": 0, "invalid": 0}

    with config.create_store() as store:
        gateway = AnalysisCacheGateway(store, algorithm=config.digest_algorithm)

        for index, item in enumerate(tqdm(items, desc="Classifying", unit="grid", disable=args.quiet)):
            dna = _extract_dna(item)
            try:
                mutant = gateway.classify(dna)
            except InvalidInput as exc:
                logger.warning("Grid %d rejected: %s", index, exc)
                counts["invalid"] += 1
                results.append({"index": index, "dna": dna, "error": str(exc)})
                continue

            counts["mutant" if mutant else "human"] += 1
            results.append({"index": index, "dna": dna, "is_mutant": mutant})

        hits, misses = gateway.hits, gateway.misses

    print(f"Classified {len(items)} grids")
    print(f"  Mutant:  {counts['mutant']}")
    print(f"  Human:   {counts['human']}")
    print(f"  Invalid: {counts['invalid']}")
    print(f"  Cache hits: {hits}, misses: {misses}")

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w") as f:
            json.dump({"summary": counts, "results": results}, f, indent=2)
        print(f"Saved to {output}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mutant-detector",
        description="Detect mutant DNA grids with cached results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--db", default=None, help="Database file (':memory:' for no persistence)")
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    classify_parser = subparsers.add_parser("classify", help="Classify one DNA grid")
    classify_parser.add_argument("rows", nargs="*", help="Grid rows, e.g. ATGC CAGT TTAT AGAC")
    classify_parser.add_argument("--file", "-f", default=None,
                                 help="JSON file with a list of rows or {\"dna\": [...]}")

    stats_parser = subparsers.add_parser("stats", help="Show mutant/human totals")
    stats_parser.add_argument("--pretty", action="store_true", help="Indent JSON output")

    batch_parser = subparsers.add_parser("batch", help="Classify every grid in a JSON file")
    batch_parser.add_argument("file", help="JSON list of grids")
    batch_parser.add_argument("--output", "-o", default=None, help="Write per-grid results here")
    batch_parser.add_argument("--quiet", "-q", action="store_true", help="Hide progress bar")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
    except (OSError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_INTERNAL

    setup_logger("mutant_detector", log_file=config.log_file, level=config.level)

    commands = {
        "classify": cmd_classify,
        "stats": cmd_stats,
        "batch": cmd_batch,
    }

    try:
        return commands[args.command](args, config)
    except InvalidInput as exc:
        print(f"Invalid DNA: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON input: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except InternalFailure as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(exc.public_message, file=sys.stderr)
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
