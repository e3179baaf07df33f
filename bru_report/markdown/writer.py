"""Streaming writer composing a Markdown document."""

import os
from collections.abc import Callable
from typing import Protocol, Self


class TextSink(Protocol):
    """Anything text can be written to, such as an open file or ``io.StringIO``."""

    def write(self, text: str, /) -> object:
        """Write text to the sink."""


class MarkdownWriter:
    """Wraps a text sink and provides operations to compose a Markdown document.

    Every fragment is written to the sink as soon as it is produced, so large
    documents are never held in memory. Each operation returns the writer so
    calls can be chained::

        writer = MarkdownWriter(stream)
        writer.h1("Title").paragraph("First line.", "Second line.").h2("Section")

    Whitespace is exact: headings and quotes are always followed by a blank
    line, table rows by a single line terminator.
    """

    def __init__(self, stream: TextSink, newline: str = os.linesep) -> None:
        self._stream = stream
        self._newline = newline

    def append(self, text: str | None) -> Self:
        """Write text without any modification; ``None`` writes nothing."""
        self._stream.write(text or "")
        return self

    def single_line(self, text: str | None = None) -> Self:
        """Write text followed by a line terminator."""
        self._stream.write((text or "") + self._newline)
        return self

    def break_line(self) -> Self:
        """Write a line terminator."""
        self._stream.write(self._newline)
        return self

    def heading(self, level: int, text: str) -> Self:
        """Write a heading of level 1 to 4 followed by a blank line.

        Raises:
            ValueError: If level is outside 1 to 4

        """
        if not 1 <= level <= 4:
            raise ValueError(f"Heading level must be between 1 and 4, got {level}")
        return self.single_line(f"{'#' * level} {text}").break_line()

    def h1(self, text: str) -> Self:
        return self.heading(1, text)

    def h2(self, text: str) -> Self:
        return self.heading(2, text)

    def h3(self, text: str) -> Self:
        return self.heading(3, text)

    def h4(self, text: str) -> Self:
        return self.heading(4, text)

    def quote(self, text: str) -> Self:
        """Write a quotation block followed by a blank line."""
        return self.single_line(f"> {text}").break_line()

    def paragraph(self, *lines: str) -> Self:
        """Write each line on its own, then a blank line."""
        for line in lines:
            self.single_line(line)
        return self.break_line()

    def code(self, lang: str | None, content: str | None) -> Self:
        """Write a fenced code block with an optional language tag."""
        self.append("```").append(lang).break_line()
        self.append(content).break_line()
        return self.single_line("```").break_line()

    def table_row(self, *columns: object) -> Self:
        """Write the columns as one table row.

        Header and alignment rows are ordinary rows, e.g.
        ``writer.table_row("Name", "Value").table_row(":--", "--:")``.
        """
        for column in columns:
            self.append(f"| {column} ")
        return self.append("|").break_line()

    def details(self, title: str, composer: Callable[[Self], object]) -> Self:
        """Write a collapsible section whose content is written by composer.

        The composer receives this writer and may call any operation,
        including another ``details``.
        """
        self.single_line("<details>")
        self.append("<summary>").append(title).append("</summary>").break_line()
        self.break_line()
        composer(self)
        return self.break_line().single_line("</details>")
