"""Flatten a shader (or any C-preprocessor-style source) and its includes.

Usage:
  shaderflat [INPUT] [--root ROOT] [--system-root DIR] [--output PATH]
             [--relative-includes] [--guard-prefix PREFIX]
             [--max-guard-length N] [--max-depth N]
             [--report-json PATH] [--report-chart PATH] [--verbose]

Defaults:
  input:        a.glsl
  root:         .
  system-root:  /
  output:       stdout
"""
import argparse
import logging
import sys
from pathlib import Path, PurePosixPath

from .errors import PreprocessError
from .guards import DEFAULT_MAX_LENGTH, DEFAULT_PREFIX
from .loader import FileLoader
from .preprocessor import DEFAULT_MAX_DEPTH, Options, preprocess_file
from .report import build_report, write_report


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shaderflat",
        description="Resolve #include directives into a single self-contained source.",
    )
    p.add_argument("input", nargs="?", default="a.glsl",
                   help="Root file, relative to --root (default: a.glsl)")
    p.add_argument("--root", "-r", default=".",
                   help='Directory "quoted" includes are read from (default: .)')
    p.add_argument("--system-root", default="/",
                   help="Directory <bracketed> includes are rooted at (default: /)")
    p.add_argument("--output", "-o", default=None,
                   help="Output file (default: stdout)")
    p.add_argument("--relative-includes", action="store_true",
                   help="Resolve quoted includes against the including file's directory")
    p.add_argument("--guard-prefix", default=DEFAULT_PREFIX,
                   help=f"Prefix of synthesized guard macros (default: {DEFAULT_PREFIX})")
    p.add_argument("--max-guard-length", type=int, default=DEFAULT_MAX_LENGTH,
                   help=f"Maximum length of the path part of guard macros (default: {DEFAULT_MAX_LENGTH})")
    p.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                   help=f"Maximum include nesting depth (default: {DEFAULT_MAX_DEPTH})")
    p.add_argument("--report-json", default=None,
                   help="Write a JSON summary of the includes to this path")
    p.add_argument("--report-chart", default=None,
                   help="Write an SVG chart of the includes to this path")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Enable debug logging")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    loader = FileLoader(args.root, args.system_root)
    # Absolute inputs are read under --system-root, like <bracketed> includes.
    input_path = str(PurePosixPath(Path(args.input).as_posix()))
    inp = loader.locate(input_path)
    if not inp.is_file():
        print(f"Input file not found: {inp}", file=sys.stderr)
        sys.exit(2)

    try:
        options = Options(
            relative_to_includer=args.relative_includes,
            guard_prefix=args.guard_prefix,
            max_guard_length=args.max_guard_length,
            max_depth=args.max_depth,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        result, session = preprocess_file(input_path, loader, options)
    except PreprocessError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(result.text, encoding="utf-8")
        print(f"Wrote {out}", file=sys.stderr)
    else:
        sys.stdout.write(result.text)

    if args.report_json or args.report_chart:
        report = build_report(session, result, input_path)
        if args.report_json:
            write_report(report, Path(args.report_json))
            print(f"Wrote {args.report_json}", file=sys.stderr)
        if args.report_chart:
            from .charts import generate_inclusion_chart

            if generate_inclusion_chart(report, Path(args.report_chart)):
                print(f"Wrote {args.report_chart}", file=sys.stderr)


if __name__ == "__main__":
    main()
