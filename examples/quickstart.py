"""
Quickstart example for the FINA package.

Run with:

    python examples/quickstart.py
"""

from __future__ import annotations

import pandas as pd

import fina


def main() -> None:
    df = pd.DataFrame(
        {
            "price": [10.0, 10.5, 11.2, 10.9, 11.8, 12.4],
            "prob": [0.2, 0.4, 0.9, 0.7, 0.6, 0.95],
            "INDC": [0, 0, 1, 1, 0, 1],
        }
    )

    print("mean price:", fina.mean(df["price"]))
    print("std dev:", fina.std_dev(df["price"]))
    print("z-scores:", fina.z_score_normalize(df["price"]).round(3).tolist())
    print("ema(0.3):", fina.ema(df["price"], 0.3).round(3).tolist())
    print("log loss:", fina.log_loss(df["prob"], df["INDC"]))

    outcome = fina.attempt(fina.min_max_normalize, [5.0, 5.0, 5.0])
    if not outcome.ok:
        print(f"min_max_normalize rejected constant data: {outcome.kind.value}")


if __name__ == "__main__":
    main()
