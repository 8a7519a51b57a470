#!/usr/bin/env python3
"""
Distribution audit for the uniform generators.

Runs seeded generations of one mode, tallies every produced value and
writes a one-row CSV with a chi-square statistic against the uniform
expectation.

Usage:
    python -m scripts.distribution_audit --mode range --min 1 --max 6 --rounds 60000 --seed AUDIT --out out/range.csv
    python -m scripts.distribution_audit --mode dice --sides 20 --rounds 100000 --seed AUDIT --out out/d20.csv
    python -m scripts.distribution_audit --mode coin --rounds 10000 --seed AUDIT --out out/coin.csv
"""
import argparse
import csv
import hashlib
import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from randcore.config import settings
from randcore.config_hash import get_config_hash
from randcore.logic.engine import GeneratorEngine
from randcore.logic.rng import SeededRNG
from randcore.protocol import GeneratorMode


AUDIT_MODES = ("range", "dice", "coin")


@dataclass
class AuditStats:
    """Frequencies accumulated during the audit."""
    rounds: int = 0
    categories: list[str] = field(default_factory=list)
    counts: Counter = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def expected(self) -> float:
        return self.total / len(self.categories) if self.categories else 0.0

    def chi_square(self) -> float:
        """Pearson chi-square over every category, observed or not."""
        expected = self.expected
        if expected <= 0:
            return 0.0
        return sum(
            (self.counts.get(c, 0) - expected) ** 2 / expected for c in self.categories
        )

    def min_freq(self) -> float:
        total = self.total
        return min(self.counts.get(c, 0) for c in self.categories) / total if total else 0.0

    def max_freq(self) -> float:
        total = self.total
        return max(self.counts.get(c, 0) for c in self.categories) / total if total else 0.0


def get_timestamp_iso() -> str:
    """Get ISO 8601 UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def seed_to_int(seed_str: str) -> int:
    """Convert string seed to integer deterministically."""
    return int(hashlib.sha256(seed_str.encode()).hexdigest(), 16) % (2**31)


def build_request(mode: str, low: int, high: int, sides: int) -> tuple[dict, list[str]]:
    """Params for one generation and the full list of expected values."""
    if mode == "range":
        lo, hi = min(low, high), max(low, high)
        return {"min": lo, "max": hi, "count": 1}, [str(v) for v in range(lo, hi + 1)]
    if mode == "dice":
        return {"dice_sides": sides, "dice_rolls": 1}, [str(v) for v in range(1, sides + 1)]
    return {"coin_flips": 1}, ["HEADS", "TAILS"]


def run_audit(
    mode: str,
    rounds: int,
    seed_str: str,
    low: int = 1,
    high: int = 6,
    sides: int = 6,
    verbose: bool = False,
) -> AuditStats:
    """
    Run seeded generations of one mode.

    Every generation shares one SeededRNG, so the sequence is fully
    reproducible from the seed string.
    """
    rng = SeededRNG(seed_to_int(seed_str))
    engine = GeneratorEngine(rng_factory=lambda _ctx: rng)
    params, categories = build_request(mode, low, high, sides)

    stats = AuditStats(categories=categories)
    progress_interval = max(1, rounds // 10)
    for i in range(rounds):
        result = engine.generate(GeneratorMode(mode), params)
        stats.counts.update(str(v) for v in result.values)
        stats.rounds += 1
        if verbose and (i + 1) % progress_interval == 0:
            print(f"  Progress: {i + 1}/{rounds} ({(i + 1) / rounds * 100:.0f}%)")
    return stats


def generate_csv(
    mode: str,
    rounds: int,
    seed_str: str,
    stats: AuditStats,
    output_path: str,
) -> None:
    """Write the one-row audit CSV."""
    row = {
        "timestamp": get_timestamp_iso(),
        "config_hash": get_config_hash(),
        "mode": mode,
        "rounds": rounds,
        "seed": seed_str,
        "categories": len(stats.categories),
        "distinct_values": len(stats.counts),
        "chi_square": f"{stats.chi_square():.4f}",
        "min_freq": f"{stats.min_freq():.6f}",
        "max_freq": f"{stats.max_freq():.6f}",
    }

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=row.keys())
        writer.writeheader()
        writer.writerow(row)

    print(f"CSV written to: {output_path}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Distribution audit for uniform generators")
    parser.add_argument("--mode", choices=AUDIT_MODES, required=True, help="Generator mode")
    parser.add_argument("--rounds", type=int, required=True, help="Number of generations")
    parser.add_argument("--seed", type=str, required=True, help="Seed string for reproducibility")
    parser.add_argument("--out", type=str, required=True, help="Output CSV path")
    parser.add_argument("--min", type=int, default=1, help="Range lower bound (range mode)")
    parser.add_argument("--max", type=int, default=6, help="Range upper bound (range mode)")
    parser.add_argument("--sides", type=int, default=6, help="Die sides (dice mode)")
    parser.add_argument("--verbose", action="store_true", help="Show progress")

    args = parser.parse_args(argv)
    if args.rounds <= 0:
        parser.error("--rounds must be positive")
    if args.mode == "range" and abs(args.max - args.min) + 1 > settings.ticket_max_pool:
        parser.error(f"range audits are limited to {settings.ticket_max_pool} categories")
    if args.mode == "dice" and not 2 <= args.sides <= settings.dice_max_sides:
        parser.error(f"--sides must be within 2..{settings.dice_max_sides}")

    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.WARNING)

    print(f"Running audit: mode={args.mode}, rounds={args.rounds}, seed={args.seed}")
    print(f"Config hash: {get_config_hash()}")

    stats = run_audit(
        mode=args.mode,
        rounds=args.rounds,
        seed_str=args.seed,
        low=args.min,
        high=args.max,
        sides=args.sides,
        verbose=args.verbose,
    )

    generate_csv(
        mode=args.mode,
        rounds=args.rounds,
        seed_str=args.seed,
        stats=stats,
        output_path=args.out,
    )

    print("\nSummary:")
    print(f"  Rounds: {stats.rounds}")
    print(f"  Categories: {len(stats.categories)} (observed {len(stats.counts)})")
    print(f"  Chi-square: {stats.chi_square():.4f} (df={len(stats.categories) - 1})")
    print(f"  Min freq: {stats.min_freq():.6f}")
    print(f"  Max freq: {stats.max_freq():.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
