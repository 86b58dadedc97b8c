#!/usr/bin/env python3
"""
Lift Progress Dashboard - command line summary.
Loads the configured sheet (or a local export) and prints the 1RM
progression per exercise.
"""

import argparse
import os
import sys

# Add repo root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.document_parser import SOURCE_FORMATS
from src.presentation import exercise_summary, populated_sessions
from src.row_tokenizer import SUPPORTED_DELIMITERS
from src.settings import build_pipeline_config, build_sheet_source, layout_for, load_config
from src.sheet_layouts import LAYOUT_NAMES
from src.sheet_loader import FAILED, SheetLoader


def print_banner():
    """Print welcome banner."""
    banner = """
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║        LIFT PROGRESS DASHBOARD - 1RM VERLAUF                 ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
    """
    print(banner)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Print estimated 1RM progression from a training sheet.")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--file", default=None, help="Parse a local export instead of fetching the sheet")
    parser.add_argument("--format", choices=SOURCE_FORMATS, default=None, help="Override pipeline.source_format")
    parser.add_argument("--layout", choices=LAYOUT_NAMES, default=None, help="Override pipeline.layout")
    parser.add_argument("--delimiter", choices=SUPPORTED_DELIMITERS, default=None, help="Override pipeline.delimiter")
    parser.add_argument("--exercise", default=None, help="Only show sets for this exercise")
    return parser.parse_args(argv)


def apply_overrides(config, args):
    """Copy command line overrides into the pipeline section."""
    pipeline = config.setdefault('pipeline', {})
    if args.format:
        pipeline['source_format'] = args.format
    if args.layout:
        pipeline['layout'] = args.layout
    if args.delimiter:
        pipeline['delimiter'] = args.delimiter
    return config


def print_catalog(catalog, layout, only_exercise=None):
    sessions = populated_sessions(catalog, layout)
    if sessions:
        print(f"Letzter Trainingstag: {sessions[-1]}\n")

    for exercise in catalog.values():
        if only_exercise and exercise.name.casefold() != only_exercise.strip().casefold():
            continue

        summary = exercise_summary(exercise)
        print("=" * 60)
        print(f"{exercise.name}  |  {summary['sets']} Sätze  |  "
              f"bester 1RM {summary['best_one_rep_max']} kg ({summary['best_session']})")
        print("=" * 60)
        for record in exercise.records:
            print(f"  {record.session:<24} {record.weight:>7g} kg x {record.reps:<4g} "
                  f"RIR {record.rir:<3g} -> 1RM {record.one_rep_max:.2f} kg")
        print()


def main(argv=None):
    """Main application flow."""
    args = parse_args(argv)
    print_banner()

    print("Loading configuration...")
    config = apply_overrides(load_config(args.config), args)

    try:
        pipeline_config = build_pipeline_config(config)
    except ValueError as e:
        print(f"\n❌ Invalid configuration: {e}")
        return 2

    loader = SheetLoader(
        source=build_sheet_source(config),
        pipeline_config=pipeline_config,
        layout=layout_for(pipeline_config),
    )

    if args.file:
        print(f"Parsing local export: {args.file}")
        with open(args.file, 'r', encoding='utf-8-sig') as f:
            state = loader.load_text(f.read())
    else:
        try:
            state = loader.load()
        except ValueError as e:
            print(f"\n❌ Invalid configuration: {e}")
            return 2

    if state.status == FAILED:
        print(f"\n❌ {state.error.user_message}")
        if state.error.detail:
            print(f"   {state.error.detail}")
        return 1

    print_catalog(state.catalog, loader.layout, args.exercise)
    return 0


if __name__ == "__main__":
    sys.exit(main())
