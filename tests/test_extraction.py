"""Tests for OID extraction, normalisation and cursor helpers."""

from __future__ import annotations

import pytest

from oidlookup.extraction import (
    OID_CHARS,
    extract_oid,
    normalize_oid,
    virtual_column_to_index,
    word_at,
)

LINE = "look at .1.3.6.1.2.1.55 here"


def test_extract_inside_digits():
    assert extract_oid(LINE, 12) == ".1.3.6.1.2.1.55"


@pytest.mark.parametrize("col", [8, 9, 15, 22])
def test_extract_anywhere_in_token_gives_whole_token(col):
    assert extract_oid(LINE, col) == ".1.3.6.1.2.1.55"


def test_extract_cursor_just_after_token_uses_left_scan():
    # index 23 is the space after "55"
    assert extract_oid(LINE, 23) == ".1.3.6.1.2.1.55"


def test_extract_away_from_digits_is_empty():
    assert extract_oid(LINE, 2) == ""
    assert extract_oid(LINE, 25) == ""


def test_extract_cursor_at_end_of_line():
    line = "oid 1.3.6"
    assert extract_oid(line, len(line)) == "1.3.6"


def test_extract_empty_line():
    assert extract_oid("", 0) == ""


def test_extract_accepts_malformed_runs():
    assert extract_oid("x ... y", 3) == "..."
    assert extract_oid("a.b", 1) == "."


def test_extract_clamps_out_of_range_columns():
    assert extract_oid("1.3.6", 99) == "1.3.6"
    assert extract_oid("1.3.6", -4) == "1.3.6"


@pytest.mark.parametrize(
    "line",
    ["", "abc", "a1b2", "sysName.0 = 1.3.6", "..1..", "日本 1.3 語"],
)
def test_extract_only_returns_oid_chars(line):
    for col in range(len(line) + 1):
        token = extract_oid(line, col)
        assert set(token) <= OID_CHARS
        adjacent = (col < len(line) and line[col] in OID_CHARS) or (
            col > 0 and line[col - 1] in OID_CHARS
        )
        assert bool(token) == adjacent


def test_normalize_strips_leading_one_of_one_one():
    assert normalize_oid("1.1.3.6") == ".1.3.6"


@pytest.mark.parametrize("oid", [".1.3.6", "11.3.6", "1.", "1", "", "1.3.6.1"])
def test_normalize_leaves_everything_else(oid):
    assert normalize_oid(oid) == oid


def test_virtual_column_ascii():
    assert virtual_column_to_index("abc", 1) == 0
    assert virtual_column_to_index("abc", 3) == 2
    assert virtual_column_to_index("abc", 4) == 3
    assert virtual_column_to_index("abc", 40) == 3


def test_virtual_column_wide_characters():
    line = "日本 1.3"
    # 日 covers cells 1-2, 本 cells 3-4, space cell 5, "1" cell 6
    assert virtual_column_to_index(line, 2) == 0
    assert virtual_column_to_index(line, 3) == 1
    assert virtual_column_to_index(line, 6) == 3


def test_word_at_cursor_on_word():
    assert word_at("value of sysName here", 11) == "sysName"


def test_word_at_keeps_qualified_names():
    assert word_at("see SNMPv2-MIB::sysDescr", 6) == "SNMPv2-MIB::sysDescr"


def test_word_at_moves_right_when_not_on_word():
    assert word_at("   ifIndex", 0) == "ifIndex"


def test_word_at_nothing_to_the_right():
    assert word_at("ifIndex   ", 9) == ""


def test_virtual_column_expands_tabs():
    line = "\t1.3.6"
    # the tab fills cells 1-8, "1" sits on cell 9
    assert virtual_column_to_index(line, 5) == 0
    assert virtual_column_to_index(line, 8) == 0
    assert virtual_column_to_index(line, 9) == 1


def test_virtual_column_tab_after_text_runs_to_next_tabstop():
    line = "ab\tc"
    # "a" cell 1, "b" cell 2, tab cells 3-8, "c" cell 9
    assert virtual_column_to_index(line, 3) == 2
    assert virtual_column_to_index(line, 8) == 2
    assert virtual_column_to_index(line, 9) == 3


def test_virtual_column_combining_marks_take_no_cells():
    line = "e\u0301 .1.3"
    # "e" + combining acute share cell 1, space cell 2, "." cell 3
    assert virtual_column_to_index(line, 2) == 2
    assert virtual_column_to_index(line, 3) == 3
