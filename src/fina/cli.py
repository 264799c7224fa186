#!/usr/bin/env python3

"""
Command line access to the FINA kernels.

Examples:
  fina mean 2 4 6
  fina dot 1 2 3 --second 4 5 6
  fina ema --csv prices.csv --column close --alpha 0.2
  fina clamp 7 0 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .errors import KernelError
from .registry import KERNELS, KernelSpec, get_kernel

logger = logging.getLogger(__name__)


def read_column(path: str | Path, column: str) -> np.ndarray:
    """Load one numeric CSV column as float64; blank cells become NaN."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"Input CSV must contain a '{column}' column.")
    return df[column].to_numpy(dtype=np.float64)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fina", description="Evaluate a FINA numeric kernel.")
    parser.add_argument("kernel", choices=sorted(KERNELS), help="Kernel to evaluate.")
    parser.add_argument(
        "values",
        nargs="*",
        type=float,
        help="First sequence for sequence kernels, or the scalar arguments in order for scalar kernels.",
    )
    parser.add_argument("--second", nargs="+", type=float, help="Second sequence for two-sequence kernels.")
    parser.add_argument("--csv", help="Read sequences from this CSV file instead of the command line.")
    parser.add_argument("--column", help="CSV column holding the first sequence.")
    parser.add_argument("--second-column", help="CSV column holding the second sequence.")
    parser.add_argument("--alpha", type=float, help="Smoothing factor for ema.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def _reject_unused(spec: KernelSpec, args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.second is not None and spec.arity != 2:
        parser.error(f"{spec.name} does not take --second")
    if args.second_column is not None and spec.arity != 2:
        parser.error(f"{spec.name} does not take --second-column")
    if args.alpha is not None and spec.arity == 0:
        parser.error(f"{spec.name} takes alpha positionally, not --alpha")
    if args.alpha is not None and "alpha" not in spec.params:
        parser.error(f"{spec.name} does not take --alpha")
    if (args.csv or args.column) and spec.arity == 0:
        parser.error(f"{spec.name} takes scalar values, not --csv")
    if args.csv and args.values:
        parser.error("positional values cannot be combined with --csv")
    if args.csv and args.second is not None:
        parser.error("--second cannot be combined with --csv; use --second-column")
    if not args.csv and (args.column or args.second_column):
        parser.error("--column and --second-column require --csv")


def _collect_arguments(spec: KernelSpec, args: argparse.Namespace, parser: argparse.ArgumentParser) -> List:
    _reject_unused(spec, args, parser)

    if spec.arity == 0:
        if len(args.values) != len(spec.params):
            parser.error(f"{spec.name} takes {len(spec.params)} value(s): {', '.join(spec.params)}")
        return list(args.values)

    if args.csv:
        if not args.column:
            parser.error("--column is required with --csv")
        sequences = [read_column(args.csv, args.column)]
        if spec.arity == 2:
            if not args.second_column:
                parser.error(f"{spec.name} needs --second-column with --csv")
            sequences.append(read_column(args.csv, args.second_column))
    else:
        sequences = [list(args.values)]
        if spec.arity == 2:
            sequences.append(list(args.second or []))

    extra = []
    if "alpha" in spec.params:
        if args.alpha is None:
            parser.error(f"{spec.name} requires --alpha")
        extra.append(args.alpha)
    return sequences + extra


def _format(value) -> str:
    if isinstance(value, np.ndarray):
        return "\n".join(repr(float(v)) for v in value)
    return repr(float(value))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    spec = get_kernel(args.kernel)
    call_args = _collect_arguments(spec, args, parser)
    logger.info("evaluating %s", spec.name)

    try:
        result = spec.func(*call_args)
    except KernelError as exc:
        print(f"error[{exc.kind.value}]: {exc.message}", file=sys.stderr)
        return 1

    print(_format(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
