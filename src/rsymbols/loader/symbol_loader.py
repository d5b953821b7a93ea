"""Loader for flat text symbol files."""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from rsymbols.ir import SymbolEntry, SymbolTable
from rsymbols.reporting import ErrorReporter, NullReporter
from .errors import (
    LoadError, LoaderStateError, MalformedLineError, SourceReadError, SourceId,
    describe_source,
)
from .line_source import read_all_lines


LineSource = Callable[[SourceId, str], List[str]]


def parse_line(line: str) -> Optional[Tuple[str, str, str, str]]:
    """Split a symbol line into (type, class_name, name, value).

    The format is "<type> <class> <name> <value>". Only the first three
    spaces delimit fields; the value keeps any further spaces verbatim.

    Returns:
        The four fields, or None if the line has fewer than three spaces
    """
    pos = line.find(" ")
    if pos < 0:
        return None
    pos2 = line.find(" ", pos + 1)
    if pos2 < 0:
        return None
    pos3 = line.find(" ", pos2 + 1)
    if pos3 < 0:
        return None

    return line[:pos], line[pos + 1:pos2], line[pos2 + 1:pos3], line[pos3 + 1:]


def parse_lines(lines: Iterable[str], source: SourceId = "<lines>") -> SymbolTable:
    """Parse symbol lines into a new table.

    Args:
        lines: Lines without terminators, in file order
        source: Identifier used in error messages

    Returns:
        Table holding one entry per (class, name); later lines win

    Raises:
        MalformedLineError: On the first line lacking three delimiters
    """
    table = SymbolTable()

    for line_number, line in enumerate(lines, 1):
        fields = parse_line(line)
        if fields is None:
            raise MalformedLineError(source, line_number, line)

        symbol_type, class_name, name, value = fields
        table.put(class_name, name, SymbolEntry(name, symbol_type, value))

    return table


class SymbolLoader:
    """Loads one symbol file into a SymbolTable.

    The loader starts unloaded. A successful load() or load_lines() makes the
    table available through get_table(); a failed load reports the error,
    raises it and leaves the loader unloaded.
    """

    def __init__(
        self,
        symbol_file: SourceId,
        reporter: Optional[ErrorReporter] = None,
        encoding: str = "utf-8",
        line_source: LineSource = read_all_lines
    ) -> None:
        """Initialize the loader.

        Args:
            symbol_file: Path of the symbol file to load
            reporter: Sink that receives the message of a failed load
            encoding: Text encoding of the symbol file
            line_source: Callable returning the lines of a source
        """
        self.symbol_file = Path(symbol_file)
        self.reporter = reporter or NullReporter()
        self.encoding = encoding
        self.line_source = line_source
        self._symbols: Optional[SymbolTable] = None

    @property
    def is_loaded(self) -> bool:
        """Check whether a table from a successful load is available."""
        return self._symbols is not None

    def load(self) -> None:
        """Read the symbol file and parse it.

        Raises:
            SourceReadError: If the file cannot be read
            MalformedLineError: If any line is malformed
        """
        self._symbols = None
        try:
            lines = self.line_source(self.symbol_file, self.encoding)
        except LoadError as e:
            self._fail(e)
            raise
        except OSError as e:
            error = SourceReadError(self.symbol_file, str(e))
            self._fail(error)
            raise error from e

        self.load_lines(lines)

    def load_lines(self, lines: Iterable[str]) -> None:
        """Parse lines already read from the symbol file.

        Raises:
            SourceReadError: If reading the lines fails partway
            MalformedLineError: If any line is malformed
        """
        self._symbols = None
        try:
            table = parse_lines(lines, self.symbol_file)
        except LoadError as e:
            self._fail(e)
            raise
        except OSError as e:
            error = SourceReadError(self.symbol_file, str(e))
            self._fail(error)
            raise error from e

        self._symbols = table

    def get_table(self) -> SymbolTable:
        """Get the table built by the last successful load.

        Raises:
            LoaderStateError: If nothing has been loaded successfully
        """
        if self._symbols is None:
            raise LoaderStateError(
                f"Symbols from {describe_source(self.symbol_file)} have not been loaded"
            )
        return self._symbols

    def _fail(self, error: LoadError) -> None:
        self._symbols = None
        self.reporter.report_error(None, str(error))
