# ruff: noqa: PLR2004

from pathlib import Path

import pytest

from char_frequency.character_counter import REPORT_HEADER, CharacterCounter
from char_frequency.models import FrequencyTable


@pytest.fixture(scope="function")
def counter() -> CharacterCounter:
    return CharacterCounter(encoding="utf-8-sig", errors="replace", output_encoding="utf-8", indent=8)


def test_scan_keeps_crlf(counter: CharacterCounter, tmp_path: Path) -> None:
    source = tmp_path / "hello.txt"
    source.write_bytes(b"Hello.\r\n")

    table = counter.scan(source)

    assert [e.character for e in table.entries] == ["H", "e", "l", "o", ".", "\r", "\n"]
    assert table.find_or_create("l").count == 2
    assert table.total_characters == 8


def test_scan_empty_file(counter: CharacterCounter, tmp_path: Path) -> None:
    source = tmp_path / "empty.txt"
    source.write_bytes(b"")

    assert counter.scan(source).entries == []


def test_scan_skips_bom_and_replaces_bad_bytes(counter: CharacterCounter, tmp_path: Path) -> None:
    source = tmp_path / "bom.txt"
    source.write_bytes(b"\xef\xbb\xbfa\xffa")

    table = counter.scan(source)

    assert [(e.character, e.count) for e in table.entries] == [("a", 2), ("�", 1)]


def test_scan_decodes_multibyte_characters(counter: CharacterCounter, tmp_path: Path) -> None:
    source = tmp_path / "utf8.txt"
    source.write_text("ñ€𝄞ñ", encoding="utf-8")

    table = counter.scan(source)

    assert [(e.character, e.count) for e in table.entries] == [("ñ", 2), ("€", 1), ("𝄞", 1)]


def test_scan_missing_file(counter: CharacterCounter, tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        counter.scan(tmp_path / "nope.txt")


def test_write_report(counter: CharacterCounter, tmp_path: Path) -> None:
    table = FrequencyTable()
    table.add_text("a\tb a")
    echoed: list[str] = []
    target = tmp_path / "report.txt"

    written = counter.write_report(table, target, echoed.append)

    assert written == 4
    expected = [REPORT_HEADER, "", "        a(97)\t2", "        (9)\t1", "        b(98)\t1", "         (32)\t1"]
    assert echoed == expected
    assert target.read_text(encoding="utf-8") == "\n".join(expected) + "\n"


def test_write_report_empty_table(counter: CharacterCounter, tmp_path: Path) -> None:
    target = tmp_path / "report.txt"

    assert counter.write_report(FrequencyTable(), target, None) == 0
    assert target.read_text(encoding="utf-8") == REPORT_HEADER + "\n\n"


def test_write_report_custom_indent(tmp_path: Path) -> None:
    table = FrequencyTable()
    table.add("z")

    CharacterCounter(indent=0).write_report(table, tmp_path / "out.txt", None)

    assert (tmp_path / "out.txt").read_text(encoding="utf-8").splitlines()[-1] == "z(122)\t1"
