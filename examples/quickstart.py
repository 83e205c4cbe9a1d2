"""Quick start example for mutant_detector.

Run this script to classify a few DNA grids and see the cache at work.
"""

import random
import time


def random_grid(n: int, rng: random.Random) -> list[str]:
    return ["".join(rng.choice("ATCG") for _ in range(n)) for _ in range(n)]


def main():
    print("Mutant Detector - Quick Start Demo")
    print("=" * 50)

    from mutant_detector import AnalysisCacheGateway, AggregateCounter, count_runs, fingerprint
    from mutant_detector.storage import InMemoryRecordStore

    mutant = ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]
    human = ["ATGCGA", "CAGTGC", "TTATGT", "AGACGG", "CCCTTA", "TCACTG"]

    store = InMemoryRecordStore()
    gateway = AnalysisCacheGateway(store)
    counter = AggregateCounter(store)

    print("\n1. Classifying reference grids...")
    for name, dna in (("mutant", mutant), ("human", human)):
        verdict = gateway.classify(dna)
        print(f"   {name}: is_mutant={verdict}, runs={count_runs(dna)}, hash={fingerprint(dna)[:16]}...")

    print("\n2. Repeating a grid hits the cache...")
    gateway.classify(mutant)
    print(f"   hits={gateway.hits}, misses={gateway.misses}")

    print("\n3. Classifying 1,000 random 50x50 grids...")
    rng = random.Random(42)
    grids = [random_grid(50, rng) for _ in range(1000)]

    start = time.perf_counter()
    for dna in grids:
        gateway.classify(dna)
    first_pass = time.perf_counter() - start

    start = time.perf_counter()
    for dna in grids:
        gateway.classify(dna)
    second_pass = time.perf_counter() - start

    print(f"   First pass:  {first_pass:.3f}s")
    print(f"   Second pass: {second_pass:.3f}s (cached)")

    print("\n4. Statistics...")
    stats = counter.stats()
    print(f"   {stats.to_dict()}")

    print("\n" + "=" * 50)
    print("Demo complete.")
    print("\nNext steps:")
    print("  - Run 'mutant-detector --help' to see CLI options")
    print("  - Try 'mutant-detector classify ATGCGA CAGTGC TTATGT AGAAGG CCCCTA TCACTG'")
    print("  - Then 'mutant-detector stats --pretty'")


if __name__ == "__main__":
    main()
