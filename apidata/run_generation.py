"""Orchestration logic for converting documentation.js JSON to API page data."""

import argparse
import logging
from pathlib import Path

from apidata.build_context import BuildContext
from apidata.content_data import make_content_data
from apidata.format_pid import format_pid
from apidata.load_config import load_config, load_manifest
from apidata.load_doc_entities import load_doc_entities
from apidata.repository_base import make_repository_base
from apidata.safe_pid import safe_pid
from apidata.write_content_file import write_content_file

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    project_root = (args.project_root or Path.cwd()).resolve()
    config = load_config(args.config or _default_config(project_root))
    manifest = load_manifest(args.manifest or project_root / "package.json")

    build = BuildContext(
        repository_base=make_repository_base(manifest, config),
        project_root=project_root,
        example_language=config["exampleLanguage"],
    )
    logger.info("Source links resolve against %s", build.repository_base)

    entities = load_doc_entities(args.doc_json)
    if not entities:
        print(f"No documented entities found in: {args.doc_json}")
        return 0

    out_root = (args.out_dir or project_root / config["outputDir"]).resolve()

    written = 0
    for entity in entities:
        pid = safe_pid(format_pid(entity.name, entity.kind))
        document = make_content_data(pid, pid, entity, build)
        if args.dry_run:
            logger.info("Would write %s (%d items)", pid, len(document.items))
            continue
        write_content_file(out_root, document)
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{len(entities)} pages")

    if args.dry_run:
        print(f"Dry run complete. {len(entities)} pages would be written.")
    else:
        print(f"Generated {written} API pages into: {out_root}")
    return 0


def _default_config(project_root: Path) -> Path | None:
    for name in ("tuidoc.config.json", "apidoc.yml"):
        candidate = project_root / name
        if candidate.exists():
            return candidate
    return None
