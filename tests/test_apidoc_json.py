"""Tests for writing page files and the command-line entry point."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from apidata.apidoc_json import main
from apidata.content_document import ContentDocument
from apidata.safe_pid import safe_pid
from apidata.write_content_file import write_content_file


def write_project(root: Path) -> Path:
    """Create a package.json and a documentation.js JSON file."""
    (root / "package.json").write_text(
        json.dumps(
            {
                "name": "tui-grid",
                "version": "4.0.0",
                "repository": {"url": "https://github.com/nhn/tui.grid.git"},
            }
        )
    )
    doc_json = root / "api.json"
    doc_json.write_text(
        json.dumps(
            [
                {
                    "name": "Grid",
                    "kind": "class",
                    "description": {
                        "type": "root",
                        "children": [
                            {
                                "type": "paragraph",
                                "children": [{"type": "text", "value": "Grid UI"}],
                            }
                        ],
                    },
                    "context": {
                        "file": str(root / "src" / "grid.js"),
                        "loc": {"start": {"line": 10}},
                    },
                    "members": {
                        "static": [],
                        "instance": [{"name": "setData", "kind": "function"}],
                    },
                },
                {"name": "Grid#click", "kind": "event"},
            ]
        )
    )
    return doc_json


def test_safe_pid() -> None:
    """Verify identifiers are made filesystem-safe."""
    assert safe_pid("Grid") == "Grid"
    assert safe_pid("module:Grid#setData") == "module-Grid-setData"
    assert safe_pid("tui.Grid") == "tui.Grid"
    assert safe_pid("##") == "Unknown"


def test_write_content_file_creates_directory(tmp_path: Path) -> None:
    """Verify nested output directories are created and JSON is indented."""
    out = tmp_path / "src" / "data" / "apiPage"
    doc = ContentDocument(pid="grid", parent_pid="grid", title="Grid", items=())
    path = write_content_file(out, doc)
    assert path == out / "grid.json"
    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "pid": "grid"')
    assert json.loads(text) == doc.to_dict()

    # Idempotent directory creation
    write_content_file(out, doc)


def test_main_integration(tmp_path: Path) -> None:
    """Verify one page file per top-level entity."""
    doc_json = write_project(tmp_path)
    out = tmp_path / "out"
    test_args = [
        "apidoc-json",
        str(doc_json),
        "--project-root",
        str(tmp_path),
        "--out-dir",
        str(out),
    ]
    with patch.object(sys, "argv", test_args):
        ret = main()
        assert ret == 0

    assert sorted(p.name for p in out.iterdir()) == ["Grid.json", "event-click.json"]

    grid = json.loads((out / "Grid.json").read_text(encoding="utf-8"))
    assert grid["title"] == "Grid"
    assert [i["type"] for i in grid["items"]] == ["overview", "instance-function"]
    assert grid["items"][0]["name"] == "new Grid()"
    assert grid["items"][0]["description"] == "Grid UI"
    assert grid["items"][0]["codeInfo"]["linkUrl"] == (
        "https://github.com/nhn/tui.grid/blob/v4.0.0/src/grid.js"
    )

    click = json.loads((out / "event-click.json").read_text(encoding="utf-8"))
    assert click["title"] == "Event-click"
    assert click["items"][0]["name"] == "click"


def test_main_uses_config_output_dir(tmp_path: Path) -> None:
    """Verify the default output directory comes from the config."""
    doc_json = write_project(tmp_path)
    (tmp_path / "tuidoc.config.json").write_text(
        json.dumps(
            {
                "outputDir": "data/api",
                "fileLink": {"repository": "https://github.com/x/y", "ref": "main"},
            }
        )
    )
    ret = main([str(doc_json), "--project-root", str(tmp_path)])
    assert ret == 0

    grid = json.loads((tmp_path / "data" / "api" / "Grid.json").read_text())
    assert grid["items"][0]["codeInfo"]["linkUrl"] == (
        "https://github.com/x/y/blob/main/src/grid.js"
    )


def test_main_dry_run(tmp_path: Path) -> None:
    """Verify a dry run writes nothing."""
    doc_json = write_project(tmp_path)
    out = tmp_path / "out"
    ret = main(
        [
            str(doc_json),
            "--project-root",
            str(tmp_path),
            "--out-dir",
            str(out),
            "--dry-run",
        ]
    )
    assert ret == 0
    assert not out.exists()


def test_main_configuration_error(tmp_path: Path) -> None:
    """Verify configuration problems exit with a message."""
    doc_json = tmp_path / "api.json"
    doc_json.write_text("[]")
    with pytest.raises(SystemExit) as exc:
        main([str(doc_json), "--project-root", str(tmp_path)])
    assert "manifest" in str(exc.value)
