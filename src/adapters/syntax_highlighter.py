"""Syntax highlighting via Rich (Pygments lexers and themes).

The lexer and theme are resolved once per process and shared read-only; see
`get_highlighter`.
"""

from __future__ import annotations

from functools import lru_cache

from rich.syntax import Syntax, SyntaxTheme
from rich.text import Text

DEFAULT_LEXER = "json"
DEFAULT_THEME = "monokai"


class SyntaxHighlighter:
    """Tokenizes text against a fixed grammar and dark theme."""

    def __init__(self, lexer: str = DEFAULT_LEXER, theme: str = DEFAULT_THEME) -> None:
        self._lexer = lexer
        self._theme: SyntaxTheme = Syntax.get_theme(theme)

    @property
    def lexer(self) -> str:
        return self._lexer

    def highlight_lines(self, text: str) -> list[Text]:
        """Return one styled `Text` per line of `text`, without line endings."""

        if not text:
            return []
        # Terminal background, so lines are not padded to the console width.
        syntax = Syntax(text, self._lexer, theme=self._theme, background_color="default")
        highlighted = syntax.highlight(text)
        return list(highlighted.split("\n", allow_blank=False))


@lru_cache(maxsize=1)
def get_highlighter() -> SyntaxHighlighter:
    return SyntaxHighlighter()
