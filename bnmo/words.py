"""Character and word readers over text streams.

A ``CharMachine`` walks a stream one character at a time, and a
``WordMachine`` builds words from it. Words are plain strings. A newline
ends a line, a space separates words, and no word is longer than
``MAX_WORD_LENGTH`` characters. Anything past that limit is left in the
stream and read as the next word.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, TextIO

MARK = "\n"
BLANK = " "
MAX_WORD_LENGTH = 150
DEFAULT_DATA_DIR = "../data"


class CharMachine:
    """Reads a text stream one character at a time."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.current: str = MARK
        self.exhausted = False

    @property
    def eop(self) -> bool:
        """True when the current character ends the line or the stream."""
        return self.exhausted or self.current == MARK

    def advance(self) -> str:
        """Move to the next character and return it ('' at end of stream)."""
        char = self.stream.read(1)
        if char == "":
            self.exhausted = True
        self.current = char
        return char


class WordMachine:
    """Builds words and lines from the characters of a stream."""

    def __init__(self, stream: TextIO) -> None:
        self.chars = CharMachine(stream)
        self.current_word = ""
        self.end_word = True

    def _at_line_end(self) -> bool:
        return self.chars.eop

    def _ignore_blanks(self) -> None:
        while self.chars.current == BLANK:
            self.chars.advance()

    def _copy_word(self) -> None:
        letters = []
        while (
            not self._at_line_end()
            and self.chars.current != BLANK
            and len(letters) < MAX_WORD_LENGTH
        ):
            letters.append(self.chars.current)
            self.chars.advance()
        self.current_word = "".join(letters)

    def _copy_word_with_blanks(self) -> None:
        letters = []
        while not self._at_line_end() and len(letters) < MAX_WORD_LENGTH:
            letters.append(self.chars.current)
            self.chars.advance()
        self.current_word = "".join(letters)

    def start_word(self) -> Optional[str]:
        """Begin a new line and read its first word; None if the line is blank."""
        self.current_word = ""
        self.chars.advance()
        self._ignore_blanks()
        if self._at_line_end():
            self.end_word = True
            return None
        self.end_word = False
        self._copy_word()
        return self.current_word

    def advance_word(self) -> Optional[str]:
        """Read the next word of the line; None once the line has ended."""
        self.current_word = ""
        self._ignore_blanks()
        if self._at_line_end():
            self.end_word = True
            return None
        self.end_word = False
        self._copy_word()
        self._ignore_blanks()
        return self.current_word

    def read_line(self) -> str:
        """Begin a new line and read it whole, spaces included."""
        self.current_word = ""
        self.chars.advance()
        if self._at_line_end():
            self.end_word = True
            return ""
        self.end_word = False
        self._copy_word_with_blanks()
        return self.current_word

    def iter_words(self) -> Iterator[str]:
        """Yield every word of the next line."""
        word = self.start_word()
        while not self.end_word:
            yield word  # type: ignore[misc]
            word = self.advance_word()


def open_data_file(file_name: str, data_dir: str = DEFAULT_DATA_DIR) -> TextIO:
    """Open ``file_name`` inside ``data_dir`` for reading.

    Raises FileNotFoundError when the file does not exist.
    """
    return open(Path(data_dir) / file_name, "r", encoding="utf-8")


def is_numeric(word: str) -> bool:
    """True when every character of ``word`` is a decimal digit."""
    return all("0" <= char <= "9" for char in word)


def word_to_int(word: str) -> int:
    """Read ``word`` as a decimal number, digit by digit."""
    result = 0
    for char in word:
        result = result * 10 + (ord(char) - ord("0"))
    return result