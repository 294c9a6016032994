"""Logic for syntax-highlighting example code with Pygments."""

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

DEFAULT_LANGUAGE = "javascript"

# Bare token spans; the frontend's code block supplies <pre> and the theme.
_FORMATTER = HtmlFormatter(nowrap=True)


def highlight_code(code: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Return ``code`` as HTML token spans for ``language``.

    Leading and trailing whitespace of the example is preserved as written.
    Unknown language names fall back to JavaScript.
    """
    if not code:
        return ""
    try:
        lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound:
        lexer = get_lexer_by_name(DEFAULT_LANGUAGE, stripnl=False, ensurenl=False)
    return highlight(code, lexer, _FORMATTER)
