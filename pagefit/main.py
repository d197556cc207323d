import argparse
import sys

from pagefit.cmd import cmd_batch, cmd_measure, cmd_render, cmd_templates
from pagefit.resume import DEFAULT_TEMPLATE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render resumes onto exactly one PDF page.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a resume to a one-page PDF")
    render_parser.add_argument("input", help="Resume file (.json, .yaml or .yml)")
    render_parser.add_argument(
        "-o",
        "--output",
        help="Output PDF path (default: <Name>_<template>_Resume.pdf)",
    )
    render_parser.add_argument(
        "-t",
        "--template",
        default=DEFAULT_TEMPLATE,
        help=f"Template id (default: {DEFAULT_TEMPLATE}; unknown ids fall back to it)",
    )
    render_parser.add_argument("-s", "--size", default="A4", help="Page size (default: A4)")
    render_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    measure_parser = subparsers.add_parser(
        "measure", help="Report measured height and solved scale"
    )
    measure_parser.add_argument("input", help="Resume file (.json, .yaml or .yml)")
    measure_parser.add_argument(
        "-t",
        "--template",
        default="all",
        help="Template id, or 'all' (default: all)",
    )
    measure_parser.add_argument("-s", "--size", default="A4", help="Page size (default: A4)")
    measure_parser.add_argument("--json", action="store_true", help="Output in JSON format")

    batch_parser = subparsers.add_parser("batch", help="Render many resumes concurrently")
    batch_parser.add_argument(
        "input",
        help="Directory path, glob pattern, or comma-separated list of resume files",
    )
    batch_parser.add_argument(
        "--out", default="resumes", help="Output directory (default: resumes/)"
    )
    batch_parser.add_argument(
        "-t", "--template", default=DEFAULT_TEMPLATE, help="Template id"
    )
    batch_parser.add_argument("-s", "--size", default="A4", help="Page size (default: A4)")
    batch_parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Worker processes (default: CPU count)",
    )
    batch_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    subparsers.add_parser("templates", help="List available templates")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "measure":
        return cmd_measure(args)
    elif args.command == "batch":
        return cmd_batch(args)
    elif args.command == "templates":
        return cmd_templates(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
