"""Errors raised while loading symbol files."""

from pathlib import Path
from typing import Union


SourceId = Union[str, Path]


def describe_source(source: SourceId) -> str:
    """Render a source identifier for messages, using absolute paths for files."""
    if isinstance(source, Path):
        return str(source.absolute())
    return source


class LoadError(Exception):
    """Base class for symbol loading failures."""


class MalformedLineError(LoadError):
    """A line does not contain the three field delimiters."""

    def __init__(self, source: SourceId, line_number: int, line: str) -> None:
        self.source = source
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"File format error reading {describe_source(source)}\tline {line_number}: '{line}'"
        )


class SourceReadError(LoadError):
    """The symbol file could not be read."""

    def __init__(self, source: SourceId, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read symbol file {describe_source(source)}: {reason}")


class LoaderStateError(LoadError):
    """The loader was asked for its table before a successful load."""
