"""Tests for the os-release style key/value parser."""

import logging

from about_settings.services.release_file import (
    ReleaseFileParser,
    parse_release_file,
    parse_release_lines,
)


class TestParseReleaseLines:
    def test_plain_value_keeps_leading_whitespace(self):
        result = parse_release_lines(["NAME=  Example  \t"])
        assert result == {"NAME": "  Example"}

    def test_double_and_single_quotes_are_stripped(self):
        result = parse_release_lines(['A="a b"', "B='a b'"])
        assert result == {"A": "a b", "B": "a b"}

    def test_mismatched_quotes_drop_line(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = parse_release_lines(["KEY=\"abc'", "OTHER=ok"])
        assert "KEY" not in result
        assert result["OTHER"] == "ok"
        assert "Quoting error" in caplog.text

    def test_invalid_keys_drop_line(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = parse_release_lines(["1KEY=x", "MY-KEY=y", " LEAD=z", "_ok9=w"])
        assert result == {"_ok9": "w"}
        assert caplog.text.count("Invalid key") == 3

    def test_backslash_escapes_collapse_everywhere(self):
        result = parse_release_lines(
            [
                r"PLAIN=a\$b\\c",
                r'QUOTED="say \"hi\""',
                r"SINGLE='it\'s'",
            ]
        )
        assert result == {"PLAIN": "a$b\\c", "QUOTED": 'say "hi"', "SINGLE": "it's"}

    def test_comments_never_contribute(self):
        result = parse_release_lines(["# NAME=hidden", "#", "NAME=shown"])
        assert result == {"NAME": "shown"}

    def test_last_occurrence_wins(self):
        result = parse_release_lines(["V=1", "V=2"])
        assert result == {"V": "2"}

    def test_missing_equals_gives_empty_value(self):
        assert parse_release_lines(["FLAG"]) == {"FLAG": ""}

    def test_value_keeps_later_equals_signs(self):
        assert parse_release_lines(["URL=http://x/?a=b"]) == {"URL": "http://x/?a=b"}

    def test_lone_quote_character_is_kept(self):
        result = parse_release_lines(['DQ="', "SQ='", "EMPTY=", 'PAIR=""'])
        assert result == {"DQ": '"', "SQ": "'", "EMPTY": "", "PAIR": ""}

    def test_quote_only_checked_at_start(self):
        assert parse_release_lines(['X=abc"']) == {"X": 'abc"'}

    def test_line_endings_are_not_part_of_key_or_value(self):
        assert parse_release_lines(["FLAG\r\n", "A=b\n"]) == {"FLAG": "", "A": "b"}


class TestParseReleaseFile:
    def test_missing_file_returns_empty(self, tmp_path):
        assert parse_release_file(tmp_path / "nope") == {}

    def test_directory_returns_empty(self, tmp_path):
        assert parse_release_file(tmp_path) == {}

    def test_reference_os_release(self, tmp_path):
        p = tmp_path / "os-release"
        p.write_text(
            'NAME=Example\nVERSION="1.2.3"\n# comment\nVERSION_ID=1.2.3-adapt\n',
            encoding="utf-8",
        )
        assert parse_release_file(p) == {
            "NAME": "Example",
            "VERSION": "1.2.3",
            "VERSION_ID": "1.2.3-adapt",
        }

    def test_parsing_is_idempotent(self, tmp_path):
        p = tmp_path / "os-release"
        p.write_text("A='x y'\nB=\\q\nbad-key=1\n", encoding="utf-8")
        assert parse_release_file(p) == parse_release_file(p)

    def test_utf8_values(self, tmp_path):
        p = tmp_path / "os-release"
        p.write_text('PRETTY_NAME="Sailfish OS – Ähtäri"\n', encoding="utf-8")
        assert parse_release_file(p)["PRETTY_NAME"] == "Sailfish OS – Ähtäri"

    def test_leading_byte_order_mark_is_dropped(self, tmp_path, caplog):
        p = tmp_path / "os-release"
        p.write_bytes(b"\xef\xbb\xbfVERSION=1.2.3\nNAME=x\n")
        with caplog.at_level(logging.WARNING):
            result = parse_release_file(p)
        assert result == {"VERSION": "1.2.3", "NAME": "x"}
        assert "Invalid key" not in caplog.text


class TestReleaseFileParser:
    def test_lookup_absent_key_is_empty(self, tmp_path):
        p = tmp_path / "hw-release"
        p.write_text("NAME=x\n", encoding="utf-8")
        parser = ReleaseFileParser(p)
        assert parser["NAME"] == "x"
        assert parser["VERSION_ID"] == ""

    def test_rereads_file_each_lookup(self, tmp_path):
        p = tmp_path / "hw-release"
        p.write_text("VERSION_ID=1\n", encoding="utf-8")
        parser = ReleaseFileParser(p)
        assert parser["VERSION_ID"] == "1"
        p.write_text("VERSION_ID=2\n", encoding="utf-8")
        assert parser["VERSION_ID"] == "2"
