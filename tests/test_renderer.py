"""Tests for renderer.py — TablePrint.tp and render."""

from collections import namedtuple

import pytest

from table_print import config
from table_print.exceptions import OptionsError
from table_print.renderer import TablePrint, render


class User:
    def __init__(self, name, email):
        self.name = name
        self.email = email


class Flag:
    def __init__(self, on):
        self.on = on


class Item:
    def __init__(self, code):
        self.code = code


Pair = namedtuple("Pair", ["left", "right"])


class Bag:
    """Record that is also iterable."""

    def __init__(self, items):
        self.items = items

    def __iter__(self):
        return iter(self.items)


def _users():
    return [User("Ada", "ada@x.io"), User("Grace", "grace@navy.mil")]


# ---------------------------------------------------------------------------
# Degenerate input
# ---------------------------------------------------------------------------


class TestNoData:
    def test_empty_list(self):
        assert render([]) == "No data."

    def test_none(self):
        assert render(None) == "No data."

    def test_all_null(self):
        assert render([None, None]) == "No data."


class TestRawDumpFallback:
    def test_primitives(self):
        assert render([1, 2, 3]) == "[1, 2, 3]"

    def test_single_string(self):
        assert render("abc") == "['abc']"

    def test_mappings_without_selection(self):
        assert render([{"a": 1}]) == "[{'a': 1}]"

    def test_nulls_dropped_before_dump(self):
        assert render([1, None]) == "[1]"

    def test_unresolvable_only(self):
        assert render([1, 2], only=["nope"]) == "[1, 2]"

    def test_fallback_is_logged(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_ENABLED", True)
        render([1])
        assert '"event": "raw_dump_fallback"' in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Table layout
# ---------------------------------------------------------------------------


class TestTable:
    def test_full_output(self):
        expected = "\n".join(
            [
                "NAME " + "  | " + "EMAIL         ",
                "-" * 23,
                "Ada  " + "  | " + "ada@x.io      ",
                "Grace" + "  | " + "grace@navy.mil",
            ]
        )
        assert render(_users()) == expected

    def test_line_count(self):
        lines = render(_users()).split("\n")
        assert len(lines) == 2 + 2

    def test_rule_matches_header(self):
        for options in ({}, {"only": "name"}, {"email": {"max_field_length": 4}}):
            header, rule = render(_users(), options).split("\n")[:2]
            assert rule == "-" * len(header)

    def test_all_lines_same_width(self):
        records = _users() + [User("Margaret Hamilton of the Apollo program", None)]
        lines = render(records, {"name": {"max_field_length": 12}}).split("\n")
        assert len({len(line) for line in lines}) == 1

    def test_single_record(self):
        lines = render(User("Ada", "ada@x.io")).split("\n")
        assert len(lines) == 3
        assert lines[2].startswith("Ada")

    def test_single_namedtuple(self):
        assert render(Pair("a", "b")) == "\n".join(
            ["LEFT" + "  | " + "RIGHT", "-" * 13, "a   " + "  | " + "b    "]
        )

    def test_single_iterable_record(self):
        lines = render(Bag([1, 2])).split("\n")
        assert lines[0] == "ITEMS "
        assert lines[2] == "[1, 2]"

    def test_generator_of_records(self):
        lines = render(User(n, "x") for n in ("Ada", "Grace")).split("\n")
        assert len(lines) == 4

    def test_nulls_skipped(self):
        lines = render([None, User("Ada", "a@b.c"), None]).split("\n")
        assert len(lines) == 3

    def test_mapping_records_with_only(self):
        result = render([{"id": 7, "tag": "x"}], only=["id"])
        assert result == "ID\n--\n7 "


# ---------------------------------------------------------------------------
# Selection options
# ---------------------------------------------------------------------------


class TestSelection:
    def test_only_overrides_include_and_except(self):
        header = render(_users(), {"only": ["email"], "except": "email"}).split("\n")[0]
        assert header == "EMAIL         "

    def test_except(self):
        header = render(_users(), {"except": ["email"]}).split("\n")[0]
        assert header == "NAME "

    def test_except_keyword_alias(self):
        header = render(_users(), except_="email").split("\n")[0]
        assert header == "NAME "

    def test_invalid_only_falls_through(self):
        header = render(_users(), {"only": ["nope"]}).split("\n")[0]
        assert header.startswith("NAME   | EMAIL")

    def test_options_must_be_mapping(self):
        with pytest.raises(OptionsError):
            render(_users(), ["name"])


# ---------------------------------------------------------------------------
# Per-field overrides
# ---------------------------------------------------------------------------


class TestFieldOverrides:
    def test_display_name(self):
        header = render(_users(), {"email": {"name": "e-mail"}}).split("\n")[0]
        assert header.endswith("E-MAIL        ")

    def test_max_field_length_truncates(self):
        lines = render(_users(), {"only": "email", "email": {"max_field_length": 10}}).split("\n")
        assert lines[0] == "EMAIL     "
        assert lines[2] == "ada@x.io  "
        assert lines[3] == "grace@n..."

    def test_max_width_ten_with_fifteen_chars(self):
        lines = render([Item("x" * 15)], {"code": {"max_field_length": 10}}).split("\n")
        assert lines[2] == "xxxxxxx..."

    def test_field_length_bypasses_sampling(self):
        lines = render([Item("ABCDEFGHI")], {"code": {"field_length": 4}}).split("\n")
        assert lines[0] == "CODE"
        assert lines[2] == "A..."

    def test_none_override_ignored(self):
        assert render(_users(), {"email": None}) == render(_users())

    def test_boolean_column_min_width(self):
        lines = render([Flag(True), Flag(False)]).split("\n")
        assert lines == ["ON   ", "-----", "True ", "False"]


# ---------------------------------------------------------------------------
# Sampling clock
# ---------------------------------------------------------------------------


class TestSamplingClock:
    def test_budget_truncates_later_rows(self, fake_clock):
        printer = TablePrint(clock=fake_clock(step=1.0), budget=0.5)
        lines = printer.tp([Item("abcd"), Item("abcdefghij")]).split("\n")
        assert lines[0] == "CODE"
        assert lines[2] == "abcd"
        assert lines[3] == "a..."

    def test_render_is_logged(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_ENABLED", True)
        render(_users())
        err = capsys.readouterr().err
        assert '"event": "render"' in err
        assert '"columns": 2' in err
        assert '"records": 2' in err
