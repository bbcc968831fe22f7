"""
run.py — Entry point for loadtable
==================================
Reads a faculty-workload workbook, builds the weekly timetable with the
greedy scheduler and writes it out as JSON (stdout by default) and,
optionally, as a CSV grid.
"""

import argparse
import json
import logging
import os
import sys

from loadtable.config.time_config import get_active_config
from loadtable.io.export import export_csv, export_json, timetable_payload
from loadtable.io.workbook import load_subjects
from loadtable.scheduler.timetable_scheduler import TimetableScheduler

logger = logging.getLogger("loadtable")


def build_parser():
    parser = argparse.ArgumentParser(description="Generate a weekly timetable from a faculty workload sheet")
    parser.add_argument("workbook", help="Path to the workload .xlsx (or .csv) file")
    parser.add_argument("--skip-rows", type=int, default=None,
                        help="Banner rows above the header (default: %d)" % get_active_config()["header_rows"])
    parser.add_argument("--seed", type=int, default=None, help="Seed for lab room numbering")
    parser.add_argument("--json", dest="json_out", default=None, help="Write the timetable JSON here instead of stdout")
    parser.add_argument("--csv", dest="csv_out", default=None, help="Also write the grid as CSV")
    parser.add_argument("--delete-upload", action="store_true", help="Remove the workbook once it has been read")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = get_active_config()
    print(f"\n📂 Processing file: {args.workbook}", file=sys.stderr)
    try:
        subjects = load_subjects(args.workbook, skip_rows=args.skip_rows, config=config)
    except Exception as e:
        logger.error("Error processing file: %s", e)
        return 1

    # only a workbook that was read successfully is discarded
    if args.delete_upload and os.path.exists(args.workbook):
        os.remove(args.workbook)

    print(f"Processed subjects: {len(subjects)}", file=sys.stderr)
    scheduler = TimetableScheduler(config, seed=args.seed)
    timetable = scheduler.generate(subjects)

    if args.json_out:
        export_json(timetable, args.json_out)
    else:
        json.dump(timetable_payload(timetable), sys.stdout, indent=2)
        sys.stdout.write("\n")
    if args.csv_out:
        export_csv(timetable, args.csv_out)

    print("\n✅ Timetable generated", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
