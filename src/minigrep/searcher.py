"""Line search strategies and the search runner."""

from abc import ABC, abstractmethod
from pathlib import Path

import typer

from minigrep.exceptions import FileReadError
from minigrep.models import Config


def split_lines(content: str) -> list[str]:
    """Split content on newlines.

    A trailing newline does not produce an empty final line, and a single
    carriage return before each newline is dropped.
    """
    segments = content.split("\n")
    # Text after the last newline; a bare \r here is kept
    tail = segments.pop()

    lines = [line[:-1] if line.endswith("\r") else line for line in segments]
    if tail:
        lines.append(tail)
    return lines


class SearchStrategy(ABC):
    """Selects the lines of some content that match a query."""

    @abstractmethod
    def matches(self, query: str, line: str) -> bool: ...

    def search(self, query: str, content: str) -> list[str]:
        """Return matching lines in the order they appear in content."""
        return [line for line in split_lines(content) if self.matches(query, line)]


class CaseSensitiveSearch(SearchStrategy):
    """Exact substring match."""

    def matches(self, query: str, line: str) -> bool:
        return query in line


class CaseInsensitiveSearch(SearchStrategy):
    """Substring match after lowercasing both sides.

    The returned lines keep their original case.
    """

    def matches(self, query: str, line: str) -> bool:
        return query.lower() in line.lower()


def get_search_strategy(ignore_case: bool) -> SearchStrategy:
    """Pick the strategy for the given case sensitivity."""
    if ignore_case:
        return CaseInsensitiveSearch()
    return CaseSensitiveSearch()


def load_content(path: str | Path) -> str:
    """Read a whole file as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FileReadError(str(path), "not valid UTF-8 text") from exc
    except OSError as exc:
        raise FileReadError(str(path), exc.strerror or str(exc)) from exc


def run(config: Config) -> list[str]:
    """Search the configured file and print each matching line.

    Returns the matched lines. Raises FileReadError if the file cannot be
    read, in which case nothing is searched or printed.
    """
    content = load_content(config.file_path)

    strategy = get_search_strategy(config.ignore_case)
    results = strategy.search(config.query, content)

    for line in results:
        # Lines are written verbatim, ANSI sequences included
        typer.echo(line, color=True)

    return results
