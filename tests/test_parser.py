from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest

from pysimpleini.errors import IniEmptySectionError
from pysimpleini.ini.model import DEFAULT_SECTION, IniDocument, Section
from pysimpleini.ini.parser import IniFileHandler


def read(text: str) -> IniDocument:
    return IniFileHandler.readstream(StringIO(text))


def dump(doc: IniDocument) -> str:
    buf = StringIO()
    IniFileHandler.writestream(doc, buf, "Created by tests")
    return buf.getvalue()


def test_readstream_default_and_named_sections():
    doc = read("# c\nfoo = bar\n[s]\nbaz = 1\n")

    assert doc[DEFAULT_SECTION] == {"foo": "bar"}
    assert doc[Section("s")] == {"baz": "1"}


def test_readstream_splits_on_first_separator_only():
    doc = read("url = a = b\nplain=novalue\nempty = \n")

    # `plain=novalue` has no " = " and is dropped.
    assert doc[DEFAULT_SECTION] == {"url": "a = b", "empty": ""}


def test_readstream_keeps_value_verbatim():
    doc = read("k = value with trailing   \n")

    assert doc[DEFAULT_SECTION]["k"] == "value with trailing   "


def test_readstream_skips_comments_only_in_first_column():
    doc = read("#k = skipped\n #k = kept\n")

    assert doc[DEFAULT_SECTION] == {" #k": "kept"}


@pytest.mark.parametrize(
    "line",
    ["[with space]", " [s]", "[s] ", "[s]x", "[]", "[a-b]", "[s]; note"],
)
def test_readstream_ignores_malformed_headers(line):
    doc = read(f"[real]\nk = v\n{line}\nx = 1\n")

    assert list(doc) == [DEFAULT_SECTION, Section("real")]
    assert doc[Section("real")] == {"k": "v", "x": "1"}


def test_readstream_handles_crlf():
    doc = read("a = 1\r\n[s]\r\nb = 2\r\n")

    assert doc[DEFAULT_SECTION] == {"a": "1"}
    assert doc[Section("s")] == {"b": "2"}


def test_readstream_commits_empty_default_once_a_header_shows_up():
    doc = read("[a]\nx = 1\n")

    assert doc[DEFAULT_SECTION] == {}
    assert doc[Section("a")] == {"x": "1"}


def test_readstream_repeated_header_replaces_earlier_pairs():
    doc = read("[a]\nx = 1\n[b]\ny = 2\n[a]\nz = 3\n")

    assert doc[Section("a")] == {"z": "3"}


def test_readstream_none_header_is_the_default_section():
    doc = read("[none]\nk = v\n")

    assert doc[DEFAULT_SECTION] == {"k": "v"}
    assert list(doc.named()) == []


@pytest.mark.parametrize(
    "text",
    ["", "# only a comment\n", "[a]\nx = 1\n[b]\n", "k = v\n[b]\nnot a pair\n"],
)
def test_readstream_empty_last_section_fails(text):
    with pytest.raises(IniEmptySectionError):
        read(text)


def test_writestream_layout():
    doc = IniDocument()
    doc[Section("s")] = {"baz": "1"}
    doc[DEFAULT_SECTION] = {"foo": "bar"}
    doc[Section("t")] = {"a": "x = y", "b": ""}

    assert dump(doc) == (
        "# Created by tests\n"
        "\n"
        "foo = bar\n"
        "\n"
        "[s]\n"
        "baz = 1\n"
        "\n"
        "[t]\n"
        "a = x = y\n"
        "b = \n"
    )


def test_writestream_without_default_section():
    doc = IniDocument()
    doc[Section("s")] = {"k": "v"}

    assert dump(doc) == "# Created by tests\n\n[s]\nk = v\n"


def test_written_text_reads_back():
    doc = IniDocument()
    doc[DEFAULT_SECTION] = {"foo": "bar"}
    doc[Section("s")] = {"a": "1", "b": "two words"}

    again = read(dump(doc))

    assert dict(again) == dict(doc)


def test_file_handler_read_write(tmp_path: Path):
    path = tmp_path / "a.ini"
    handler = IniFileHandler(path, header_comment="hi")
    doc = IniDocument()
    doc[Section("s")] = {"k": "v"}

    handler.write(doc)

    assert path.read_text(encoding="utf-8") == "# hi\n\n[s]\nk = v\n"
    assert dict(handler.read()) == {DEFAULT_SECTION: {}, Section("s"): {"k": "v"}}
    assert handler.filename == str(path)
    assert str(path) in str(handler)


def test_file_handler_read_missing_file_raises(tmp_path: Path):
    with pytest.raises(OSError):
        IniFileHandler(tmp_path / "nope.ini").read()


def test_file_handler_uses_given_encoding(tmp_path: Path):
    path = tmp_path / "gbk.ini"
    path.write_bytes("名字 = 值\n".encode("gbk"))

    doc = IniFileHandler(path, encoding="gbk").read()

    assert doc[DEFAULT_SECTION] == {"名字": "值"}
