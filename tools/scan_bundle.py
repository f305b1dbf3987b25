#!/usr/bin/env python3
"""
Bundle screening CLI tool

Screens JSON bundle files (a list of transactions, each a list of
{address, topics, data} logs as emitted during simulation) for sandwich
patterns.
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from tabulate import tabulate

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging_config
from sandwich_guard.aggregator import aggregate_bundle
from sandwich_guard.config_schema import DetectorConfig, load_config
from sandwich_guard.constants import CONFIG_ENV_VAR
from sandwich_guard.detector import SandwichDetector
from sandwich_guard.exceptions import ConfigurationError, DecodeError
from sandwich_guard.utils import format_sequence, load_bundle_file


def scan_single_bundle(
    bundle_path: Path, detector: SandwichDetector, verbose: bool = False
) -> Dict[str, Any]:
    """
    Screen a single bundle file

    Returns:
        Dictionary with screening results
    """
    result = {
        "file": str(bundle_path),
        "transactions": 0,
        "flagged": False,
        "pool": None,
        "pattern": None,
        "errors": [],
        "pools": [],
    }

    try:
        bundle = load_bundle_file(bundle_path)
    except FileNotFoundError as e:
        result["errors"].append(f"File not found: {e}")
        return result
    except DecodeError as e:
        result["errors"].append(f"Bundle parsing error: {e}")
        return result

    result["transactions"] = len(bundle)
    verdict = detector.screen(bundle)
    result["flagged"] = verdict.flagged
    result["pool"] = verdict.pool_hex
    result["pattern"] = verdict.pattern.value if verdict.pattern else None

    if verbose:
        sequences = aggregate_bundle(bundle, detector.config.enabled_protocols)
        for pool in sequences.pools(sort=True):
            result["pools"].append(
                {
                    "pool": pool.hex(),
                    "sequence": format_sequence(sequences.combined[pool]),
                    "swaps": len(sequences.swaps.get(pool, [])),
                }
            )

    return result


def resolve_config(config_path: Optional[str]) -> DetectorConfig:
    """Load config from --config, then $SANDWICH_GUARD_CONFIG, else defaults"""
    path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return DetectorConfig()
    return load_config(path)


def print_scan_results(
    results: List[Dict[str, Any]], verbose: bool = False, json_output: bool = False
):
    """Print screening results in human-readable or JSON format"""

    if json_output:
        print(json.dumps(results, indent=2, default=str))
        return

    print(f"\n=== Bundle Screening Results ===")
    print(f"Bundles scanned: {len(results)}")
    print(f"Flagged: {sum(1 for r in results if r['flagged'])}")
    print("=" * 32)

    for result in results:
        if result["errors"]:
            status = "✗ ERROR"
        elif result["flagged"]:
            status = "✗ SANDWICH"
        else:
            status = "✓ CLEAN"

        print(f"\n{status}: {result['file']} ({result['transactions']} txs)")

        for error in result["errors"]:
            print(f"    - {error}")

        if result["flagged"]:
            print(f"    pool: {result['pool']} ({result['pattern']} pattern)")

        if verbose and result["pools"]:
            print(
                tabulate(
                    [[p["pool"], p["swaps"], p["sequence"]] for p in result["pools"]],
                    headers=["Pool", "Swaps", "Sequence (B/S/L)"],
                    tablefmt="simple",
                )
            )


def main():
    """Main CLI entry point"""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Screen simulated bundles for sandwich attack patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Screen a single bundle
  python tools/scan_bundle.py bundles/bundle_001.json

  # Show per-pool sequences
  python tools/scan_bundle.py --verbose bundles/*.json

  # Exit non-zero if any bundle is flagged
  python tools/scan_bundle.py --strict --config configs/detector.yaml bundles/
        """,
    )

    parser.add_argument("bundle_files", nargs="+", help="Bundle JSON file(s)")
    parser.add_argument(
        "--config",
        "-c",
        help=f"Detector YAML config (default: ${CONFIG_ENV_VAR} or built-in defaults)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show per-pool sequences"
    )
    parser.add_argument(
        "--json", "-j", action="store_true", help="Output results in JSON format"
    )
    parser.add_argument(
        "--strict",
        "-s",
        action="store_true",
        help="Exit with error code if any bundle is flagged or unreadable",
    )

    args = parser.parse_args()

    try:
        config = resolve_config(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 2

    logging_config.setup(level=config.log_level)
    detector = SandwichDetector(config)

    bundle_paths = []
    for entry in args.bundle_files:
        path = Path(entry)
        if path.is_dir():
            bundle_paths.extend(sorted(path.rglob("*.json")))
        else:
            bundle_paths.append(path)

    results = [scan_single_bundle(p, detector, verbose=args.verbose) for p in bundle_paths]

    print_scan_results(results, verbose=args.verbose, json_output=args.json)

    if args.strict and any(r["flagged"] or r["errors"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
