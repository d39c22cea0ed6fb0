"""Example: profile a slow function and print its timing report.

Run with:
    python examples/profile_example.py
"""

import random
import time

from loglens import wrap


def slow_lookup(key: str) -> str:
    time.sleep(random.uniform(0.05, 0.1))
    return key.upper()


profiled_lookup = wrap(slow_lookup)

if __name__ == "__main__":
    for i in range(10):
        profiled_lookup(f"key-{i}")
    print(profiled_lookup.report())
