#!/usr/bin/env python3
"""
VarModel CLI
Command-line interface for inspecting variation models and computing deltas
"""

import argparse
import logging
import traceback
from pathlib import Path

from .api import glyph_deltas, load_designspace, load_masters
from .config import load_settings
from .utils.logging import VarModelLogger
from .writers.model_writer import (
    ModelWriter,
    deltas_to_dict,
    dump_json,
    dump_yaml,
    model_to_dict,
)

MASTERS_SUFFIXES = [".yaml", ".yml", ".json"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="varmodel",
        description="Inspect variation models and compute master deltas\n"
        "Input is a .designspace file or a masters document (.yaml/.yml/.json).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    model_parser = subparsers.add_parser("model", help="Show sorted masters, regions and weights")
    model_parser.add_argument("input", help="Input file (.designspace or masters document)")
    model_parser.add_argument(
        "-o", "--output", help="Output file; .yaml/.yml/.json write data, anything else a report"
    )

    deltas_parser = subparsers.add_parser("deltas", help="Compute deltas for master values")
    deltas_parser.add_argument("input", help="Input file (.designspace or masters document)")
    deltas_parser.add_argument(
        "-g", "--glyph", help="Glyph to read from the UFO masters (designspace input only)"
    )
    deltas_parser.add_argument(
        "-o", "--output", help="Output file; .yaml/.yml/.json write data, anything else a report"
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug traces to the log file")
    return parser


def _emit(content: str, output) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content + "\n")
        VarModelLogger.success(f"Wrote {output}")
        print(f"✓ Written: {output}")
    else:
        print(content)


def _format(data, report: str, output) -> str:
    suffix = Path(output).suffix.lower() if output else ""
    if suffix in [".yaml", ".yml"]:
        return dump_yaml(data)
    if suffix == ".json":
        return dump_json(data)
    return report


def _run_model(args, writer: ModelWriter) -> int:
    input_path = Path(args.input)
    if input_path.suffix.lower() == ".designspace":
        ds_model = load_designspace(input_path)
        model = ds_model.model
        names = {}
        for name, location in ds_model.source_locations.items():
            names.setdefault(location, name)
    else:
        masters = load_masters(input_path)
        model, names = masters.model, masters.names

    _emit(_format(model_to_dict(model), writer.write(model, names), args.output), args.output)
    return 0


def _run_deltas(args, writer: ModelWriter) -> int:
    input_path = Path(args.input)
    if input_path.suffix.lower() == ".designspace":
        if not args.glyph:
            VarModelLogger.error("--glyph is required for designspace input")
            return 1
        ds_model, deltas = glyph_deltas(input_path, args.glyph)
        model = ds_model.model
        names = {}
        for name, location in ds_model.source_locations.items():
            names.setdefault(location, name)
    else:
        if args.glyph:
            VarModelLogger.warning("--glyph is ignored for masters documents")
        masters = load_masters(input_path)
        model, names = masters.model, masters.names
        deltas = model.deltas(masters.point_seqs)

    VarModelLogger.info(f"Computed deltas for {len(deltas)} of {len(model)} masters")
    data = deltas_to_dict(model, deltas, names)
    _emit(_format(data, writer.write_deltas(model, deltas, names), args.output), args.output)
    return 0


def main(argv=None):
    """CLI entry point"""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Input file {input_path} does not exist")
        return 1

    settings = load_settings()
    log_level = logging.DEBUG if args.verbose else settings.log_level
    VarModelLogger.setup_logger(str(input_path), log_level=log_level, keep_count=settings.keep_logs)

    if input_path.suffix.lower() not in MASTERS_SUFFIXES + [".designspace"]:
        VarModelLogger.error(f"Unsupported input format {input_path.suffix}")
        VarModelLogger.error("Supported formats: .designspace, .yaml, .yml, .json")
        VarModelLogger.cleanup()
        return 1

    writer = ModelWriter(precision=settings.report_precision)
    try:
        if args.command == "model":
            return _run_model(args, writer)
        return _run_deltas(args, writer)

    except Exception as e:
        error_msg = str(e)
        if '\n' in error_msg:
            VarModelLogger.error("Error while processing:")
            for line in error_msg.split('\n'):
                if line.strip():
                    VarModelLogger.error(f"  {line}")
        else:
            VarModelLogger.error(f"Error while processing: {error_msg}")

        VarModelLogger.debug("Full traceback:")
        VarModelLogger.debug(traceback.format_exc())
        return 1
    finally:
        log_path = VarModelLogger.get_log_file_path()
        if log_path:
            print(f"\nLog file: {log_path}")
        VarModelLogger.cleanup()


if __name__ == "__main__":
    exit(main())
