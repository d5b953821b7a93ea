"""Reading symbol files as lines of text."""

from pathlib import Path
from typing import List

from .errors import SourceId, SourceReadError


def read_all_lines(source: SourceId, encoding: str = "utf-8") -> List[str]:
    """Read a text file and return its lines without line terminators.

    Args:
        source: Path to the symbol file
        encoding: Text encoding of the file

    Returns:
        Ordered list of lines; an empty file gives an empty list

    Raises:
        SourceReadError: If the file is missing, unreadable or not decodable
    """
    try:
        with open(Path(source), "r", encoding=encoding) as f:
            content = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise SourceReadError(source, str(e)) from e

    lines = content.split("\n")

    # A trailing newline terminates the last line rather than starting a new one
    if lines[-1] == "":
        lines.pop()

    return lines
