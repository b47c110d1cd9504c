"""
Indentation-aware text writers for generated source.

A root :class:`StreamCodeWriter` writes to a text stream. Wrapping any writer
in an :class:`IndentCodeWriter` indents every line written through the wrapper
by one more unit; wrappers nest, so each level adds exactly one unit.
"""

import io
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class CodeWriter(ABC):
    """Line-oriented writer with a fixed indentation unit."""

    def write(self, text: str) -> None:
        """Write text without ending the line."""
        lines = text.split("\n")
        for index, line in enumerate(lines):
            if index:
                self._newline()
            if line:
                self._write_raw(line)

    def writeln(self, text: str = "") -> None:
        """Write text followed by a line break."""
        self.write(text)
        self._newline()

    def end_line(self) -> None:
        """End the current line unless nothing has been written on it."""
        if not self.at_line_start:
            self._newline()

    @property
    @abstractmethod
    def indent_unit(self) -> str:
        """The string prepended once per indentation level."""
        pass

    @property
    @abstractmethod
    def at_line_start(self) -> bool:
        """True when the next write begins a new line."""
        pass

    @property
    @abstractmethod
    def depth(self) -> int:
        """Number of indenting wrappers between this writer and the root."""
        pass

    @abstractmethod
    def _write_raw(self, text: str) -> None:
        """Write text that contains no line break."""
        pass

    @abstractmethod
    def _newline(self) -> None:
        """End the current line."""
        pass

    def indented(self) -> "IndentCodeWriter":
        """Return a writer one level deeper than this one."""
        return IndentCodeWriter(self)


class StreamCodeWriter(CodeWriter):
    """Root writer that sends text to a stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        indent_unit: str = "    ",
        line_ending: str = "\n",
    ):
        """
        Initialize the writer.

        Args:
            stream: Output stream (defaults to an in-memory buffer)
            indent_unit: One tab or a run of spaces, used for every level
            line_ending: Text written at the end of every line
        """
        self.stream = stream if stream is not None else io.StringIO()
        self._indent_unit = indent_unit
        self.line_ending = line_ending
        self._at_line_start = True

    @classmethod
    def from_config(cls, config, stream: Optional[TextIO] = None) -> "StreamCodeWriter":
        """Create a writer using the indentation settings of a GeneratorConfig."""
        return cls(stream, indent_unit=config.indent_unit, line_ending=config.line_ending)

    @property
    def indent_unit(self) -> str:
        return self._indent_unit

    @property
    def depth(self) -> int:
        return 0

    @property
    def at_line_start(self) -> bool:
        return self._at_line_start

    def _write_raw(self, text: str) -> None:
        self.stream.write(text)
        self._at_line_start = False

    def _newline(self) -> None:
        self.stream.write(self.line_ending)
        self._at_line_start = True

    def getvalue(self) -> str:
        """Return everything written so far (in-memory streams only)."""
        return self.stream.getvalue()


class IndentCodeWriter(CodeWriter):
    """Writer that indents each line by one unit and forwards to its parent."""

    def __init__(self, parent: CodeWriter):
        self.parent = parent
        self._at_line_start = True

    @property
    def indent_unit(self) -> str:
        return self.parent.indent_unit

    @property
    def depth(self) -> int:
        return self.parent.depth + 1

    @property
    def at_line_start(self) -> bool:
        return self._at_line_start

    def _start_line(self) -> None:
        if self._at_line_start:
            self.parent._write_raw(self.indent_unit)
            self._at_line_start = False

    def _write_raw(self, text: str) -> None:
        self._start_line()
        self.parent._write_raw(text)

    def _newline(self) -> None:
        # Blank lines still carry the prefix
        self._start_line()
        self.parent._newline()
        self._at_line_start = True
