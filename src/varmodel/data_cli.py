#!/usr/bin/env python3
"""CLI utility for managing VarModel settings"""

import argparse
import sys

from .config import SETTINGS_FILE, get_data_manager, load_settings
from .writers.model_writer import dump_yaml


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="varmodel-data", description="Manage VarModel settings files"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: info
    subparsers.add_parser("info", help="Show data file locations and the effective settings")

    # Command: path
    subparsers.add_parser("path", help="Show user data directory path")

    # Command: reset
    reset_parser = subparsers.add_parser("reset", help="Remove the user settings override")
    reset_parser.add_argument(
        "--file", default=SETTINGS_FILE, help=f"File to reset (default: {SETTINGS_FILE})"
    )

    # Command: axis-order
    order_parser = subparsers.add_parser(
        "axis-order", help="Set the axis priority used when masters documents omit 'axes'"
    )
    order_parser.add_argument("axes", nargs="+", help="Axis names, most important first")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    dm = get_data_manager()

    if args.command == "info":
        info = dm.get_data_info()
        print(f"\n📦 Package data directory:\n   {info['package_data_dir']}")
        print(f"\n📁 User data directory:\n   {info['user_data_dir']}")

        if info["user_files"]:
            print("\n📄 User files (override defaults):")
            for file in info["user_files"]:
                print(f"   • {file}")
        else:
            print("\n📄 User files: None")

        print("\n⚙️  Effective settings:")
        for line in dump_yaml(load_settings().as_dict()).splitlines():
            print(f"   {line}")

    elif args.command == "path":
        print(dm.user_data_dir)

    elif args.command == "reset":
        if dm.reset_to_defaults(args.file):
            print(f"Reset {args.file} to defaults")
        else:
            print(f"{args.file} was already using defaults")

    elif args.command == "axis-order":
        data = dm.load_user_data(SETTINGS_FILE)
        data["axis_order"] = list(args.axes)
        dm.save_user_data(SETTINGS_FILE, data)
        print(f"✓ Axis order: {', '.join(args.axes)}")
        print(f"   Saved to {dm.user_data_dir / SETTINGS_FILE}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
