"""Main orchestration script for generating documentation.js JSON and API page data."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full API data generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate documentation.js JSON and API page data."
    )
    parser.add_argument(
        "entry",
        nargs="+",
        help="Source entry files passed to `documentation build`",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the page data without writing files",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--out-dir",
        help="Directory for the generated API page JSON",
    )
    args = parser.parse_args()

    root_dir = Path.cwd()
    doc_json = root_dir / "api.json"

    # 1. Parse doc comments with documentation.js
    print("--- Step 1: Generating documentation.js JSON ---")
    run_command(
        [
            "npx",
            "documentation",
            "build",
            *args.entry,
            "--format",
            "json",
            "--output",
            str(doc_json),
        ]
    )

    # 2. Convert to API page data
    print("\n--- Step 2: Converting doc JSON to API page data ---")
    cmd = [sys.executable, "-m", "apidata.apidoc_json", str(doc_json)]

    if args.dry_run:
        cmd.append("--dry-run")
    if args.config:
        cmd.extend(["--config", args.config])
    if args.out_dir:
        cmd.extend(["--out-dir", args.out_dir])

    run_command(cmd)

    print("\nSUCCESS: API page data generated")


if __name__ == "__main__":
    main()
