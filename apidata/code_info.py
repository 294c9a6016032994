"""Logic for resolving where an item is declared."""

from pathlib import PurePosixPath

from apidata.build_context import BuildContext
from apidata.display_item import CodeInfo
from apidata.doc_entity import SourceContext


def make_code_info(context: SourceContext | None, build: BuildContext) -> CodeInfo:
    """Return the file name, line and repository permalink of a declaration."""
    if context is None:
        return CodeInfo()

    file_path = PurePosixPath(context.file)
    root = PurePosixPath(build.project_root.as_posix())
    try:
        repo_path = file_path.relative_to(root).as_posix()
    except ValueError:
        # Outside the project root: link the path as given.
        repo_path = context.file.lstrip("/")

    return CodeInfo(
        filename=file_path.name,
        line_num=context.line,
        link_url=f"{build.repository_base}{repo_path}",
    )
