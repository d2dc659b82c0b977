import argparse
import sys
from dataclasses import replace

from config import DatasetConfig, load_config
from errors import HouseholdPowerError
from plots import PLOTS, render
from prepare_data import DateRange, prepare


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Plot household power consumption over a date window.")
    p.add_argument("--config", help="Path to JSON config overriding the dataset defaults.")
    p.add_argument("--start", default="1/2/2007", help="First day, dd/mm/yyyy.")
    p.add_argument("--end", default="2/2/2007", help="Last day, dd/mm/yyyy (inclusive).")
    p.add_argument("--plot", nargs="+", default=["all"], choices=sorted(PLOTS) + ["all"],
                   help="Which charts to draw.")
    p.add_argument("--output-dir", help="Directory for the PNG files.")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args.config) if args.config else DatasetConfig()
    except (OSError, ValueError) as exc:
        print(f"Error: bad config {args.config}: {exc}", file=sys.stderr)
        return 1
    if args.output_dir:
        config = replace(config, output_dir=args.output_dir)

    variants = sorted(PLOTS) if "all" in args.plot else args.plot

    try:
        hpc = prepare(DateRange(args.start, args.end), config)
    except HouseholdPowerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for variant in variants:
        render(variant, hpc, config.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
