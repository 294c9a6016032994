"""Logic for writing API page documents to disk."""

import json
import logging
from pathlib import Path

from apidata.content_document import ContentDocument

logger = logging.getLogger(__name__)


def output_file_for_pid(out_root: Path, pid: str) -> Path:
    """Return ``<out_root>/<pid>.json``, creating ``out_root`` if needed."""
    out_root.mkdir(parents=True, exist_ok=True)
    return out_root / f"{pid}.json"


def write_content_file(out_root: Path, document: ContentDocument) -> Path:
    """Write one document as 2-space indented UTF-8 JSON."""
    out_file = output_file_for_pid(out_root, document.pid)
    out_file.write_text(
        json.dumps(document.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.debug("Wrote %s", out_file)
    return out_file
