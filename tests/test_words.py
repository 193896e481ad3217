import io

import pytest

from bnmo.words import (
    MAX_WORD_LENGTH,
    CharMachine,
    WordMachine,
    is_numeric,
    open_data_file,
    word_to_int,
)


def machine(text):
    return WordMachine(io.StringIO(text))


def test_char_machine_reads_until_newline():
    chars = CharMachine(io.StringIO("abc\nrest"))
    seen = []
    chars.advance()
    while not chars.eop:
        seen.append(chars.current)
        chars.advance()
    assert "".join(seen) == "abc"
    assert chars.current == "\n"


def test_char_machine_end_of_stream():
    chars = CharMachine(io.StringIO("x"))
    assert chars.advance() == "x"
    assert chars.eop is False
    assert chars.advance() == ""
    assert chars.eop is True
    assert chars.exhausted is True


def test_iter_words_splits_line():
    assert list(machine("TESTING MESIN KATA\n").iter_words()) == [
        "TESTING",
        "MESIN",
        "KATA",
    ]


def test_iter_words_ignores_repeated_blanks():
    assert list(machine("   a   bb  \n").iter_words()) == ["a", "bb"]


def test_start_and_advance_word():
    wm = machine("START GAME\n")
    assert wm.start_word() == "START"
    assert wm.end_word is False
    assert wm.advance_word() == "GAME"
    assert wm.advance_word() is None
    assert wm.end_word is True
    assert wm.current_word == ""


def test_blank_line_gives_no_words():
    wm = machine("\n")
    assert wm.start_word() is None
    assert wm.end_word is True


def test_successive_lines():
    wm = machine("one two\nthree\n")
    assert list(wm.iter_words()) == ["one", "two"]
    assert list(wm.iter_words()) == ["three"]


def test_long_word_is_cut_and_rest_read_next():
    long_word = "a" * (MAX_WORD_LENGTH + 50)
    words = list(machine(long_word + "\n").iter_words())
    assert [len(w) for w in words] == [MAX_WORD_LENGTH, 50]
    assert "".join(words) == long_word


def test_read_line_keeps_blanks():
    wm = machine("TESTING START LINE\n")
    assert wm.read_line() == "TESTING START LINE"
    assert wm.end_word is False


def test_read_line_successive_and_empty():
    wm = machine("first line\n\nthird\n")
    assert wm.read_line() == "first line"
    assert wm.read_line() == ""
    assert wm.end_word is True
    assert wm.read_line() == "third"


def test_read_line_truncates():
    text = "b" * (MAX_WORD_LENGTH + 10)
    assert machine(text + "\n").read_line() == text[:MAX_WORD_LENGTH]


def test_open_data_file_reads_lines(tmp_path):
    (tmp_path / "save.txt").write_text("2\nRNG\nDiner DASH\n", encoding="utf-8")
    with open_data_file("save.txt", tmp_path) as stream:
        wm = WordMachine(stream)
        lines = [wm.read_line() for _ in range(3)]
    assert lines == ["2", "RNG", "Diner DASH"]
    assert word_to_int(lines[0]) == 2


def test_open_data_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_data_file("missing.txt", tmp_path)


def test_word_equality_of_strings():
    assert list(machine("HAI\n").iter_words()) == ["HAI"]
    assert list(machine("HAI\n").iter_words()) != ["HELLO"]


@pytest.mark.parametrize(
    "word, expected",
    [("HAI", False), ("123", True), ("12a", False), ("", True)],
)
def test_is_numeric(word, expected):
    assert is_numeric(word) is expected


@pytest.mark.parametrize("word", ["0", "7", "123", "100"])
def test_word_to_int_round_trip(word):
    assert word_to_int(word) == int(word)
    assert str(word_to_int(word)) == word


def test_word_to_int_empty():
    assert word_to_int("") == 0