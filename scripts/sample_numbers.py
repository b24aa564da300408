#!/usr/bin/env python3
"""Print random valid Nigerian numbers with their derived info as JSON lines.

Usage:
    python scripts/sample_numbers.py                 # 10 numbers, any provider
    python scripts/sample_numbers.py -n 5 -p MTN     # 5 MTN numbers
    python scripts/sample_numbers.py --seed 42       # reproducible output
"""
from __future__ import annotations

import argparse
import json
import random
import sys

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from ngphone.core.logging import setup_logging
from ngphone.core.settings import get_settings
from ngphone.telco.service import PhoneService


def sample(service: PhoneService, count: int, provider: str | None) -> list[dict]:
    """Generate *count* numbers and return their info records."""
    rows: list[dict] = []
    for _ in range(count):
        number = service.generate_random(provider)
        rows.append(service.get_info(str(number)).to_dict())
    return rows


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-n", "--count", type=int, default=10)
    parser.add_argument("-p", "--provider", default=None)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    setup_logging()
    settings = get_settings()
    service = PhoneService(
        capacity=settings.cache_capacity,
        cache_key=settings.cache_key,
        rng=random.Random(args.seed),
    )

    for row in sample(service, args.count, args.provider):
        print(json.dumps(row))


if __name__ == "__main__":
    main()
