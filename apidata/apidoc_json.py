"""Convert documentation.js JSON output to API page data for the docs site.

Reads the JSON array emitted by ``documentation build --format json``, builds
one content document per top-level entity (overview, static members, instance
methods) and writes each to ``<out-dir>/<pid>.json``.
"""

import argparse
import logging
from pathlib import Path

from apidata.configuration_error import ConfigurationError
from apidata.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description="Convert documentation.js JSON to API page JSON files.",
    )
    ap.add_argument(
        "doc_json",
        type=Path,
        help="JSON file produced by `documentation build --format json`",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        help="Output directory (default: outputDir from the config)",
    )
    ap.add_argument(
        "--config",
        type=Path,
        help="Generator config, YAML or JSON (default: tuidoc.config.json)",
    )
    ap.add_argument(
        "--manifest",
        type=Path,
        help="Project manifest (default: <project-root>/package.json)",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        help="Root that source links are made relative to (default: cwd)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Build every document without writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log each written file",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run_generation(args)
    except ConfigurationError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    raise SystemExit(main())
