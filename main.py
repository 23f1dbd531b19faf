#!/usr/bin/env python3
"""
Main script for summarizing replicate measurements with uncertainties.
"""

# Pipeline overview:
# 1) Load a CSV with one column per measured quantity and one row per replicate.
# 2) For every numeric column compute the arithmetic mean ± sample standard
#    deviation and, when all replicates share a sign, the geometric mean with
#    its multiplicative error factor.
# 3) Round each mean to the precision implied by its uncertainty and export
#    the summary table as CSV.

import argparse
import logging
import os
import sys
import time

import pandas as pd

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("errbar_summary.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from errbar import NormStrategy, UncertainValue, lists
from errbar.reporting import format_value_with_uncertainty, summary_frame_from_table

DEFAULT_INPUT = os.path.join("data", "example_replicates.csv")
DEFAULT_OUTPUT_DIR = "output"


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the summary script."""
    parser = argparse.ArgumentParser(
        description="Summarize replicate measurements as value ± uncertainty."
    )
    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT,
        help=f"Path to input CSV file (default: {DEFAULT_INPUT}).",
    )
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--norm",
        default="l2",
        type=NormStrategy.parse,
        help="Norm used to combine the means into a total: l1, l2 or lp:<p>.",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="Use the vectorized numpy estimators.",
    )
    return parser


def main(argv=None):
    """Main execution function with step timing logs."""
    args = _build_arg_parser().parse_args(argv)

    start_time = time.time()
    logging.info("Initializing replicate summary pipeline")

    if not os.path.exists(args.input):
        logging.error("Input file not found: %s", args.input)
        return 1

    step_start = time.time()
    raw_df = pd.read_csv(args.input)
    logging.info(
        "Loaded %d rows x %d columns from %s in %.2f seconds",
        raw_df.shape[0],
        raw_df.shape[1],
        args.input,
        time.time() - step_start,
    )

    step_start = time.time()
    summary_df = summary_frame_from_table(raw_df, fast=args.fast)
    logging.info(
        "Summary computed for %d quantities in %.2f seconds",
        len(summary_df),
        time.time() - step_start,
    )

    if summary_df.empty:
        logging.error("No column had at least two finite values. Terminating.")
        return 1

    for name, row in summary_df.iterrows():
        logging.info("  %s = %s (n=%d)", name, row["reported"], int(row["n"]))

    means = [
        UncertainValue(row["mean"], row["sd"]) for _, row in summary_df.iterrows()
    ]
    total = UncertainValue.sum(means, args.norm)
    logging.info(
        "Sum of means (%s): %s", args.norm, format_value_with_uncertainty(total)
    )
    logging.info(
        "Largest mean: %s",
        format_value_with_uncertainty(lists.max_value(means)),
    )

    os.makedirs(args.outdir, exist_ok=True)
    out_path = os.path.join(args.outdir, "summary.csv")
    summary_df.to_csv(out_path)
    logging.info("Summary CSV written to %s", out_path)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
