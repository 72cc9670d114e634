"""Tests for string → typed argument adaptation."""
import logging

import pytest

from functool.tools import (
    BOOLEAN,
    INTEGER,
    NUMBER,
    STRING,
    ArgumentAdapter,
    adapter_for_label,
    param,
)
from functool.tools.adapters import adapt_arguments


class TestBuiltinAdapters:
    @pytest.mark.parametrize("raw, expected", [("3", 3), (" -12 ", -12), ("0", 0)])
    def test_integer_parses(self, raw, expected):
        arg = INTEGER.adapt(raw)
        assert arg.value == expected
        assert arg.used_default is False

    @pytest.mark.parametrize("raw", ["", "abc", "3.5", "4x"])
    def test_integer_falls_back_to_zero(self, raw):
        arg = INTEGER.adapt(raw)
        assert arg.value == 0
        assert arg.used_default is True
        assert arg.raw == raw

    def test_number_parses(self):
        assert NUMBER.adapt("2.5").value == 2.5
        assert NUMBER.adapt("7").value == 7.0

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "ten"])
    def test_number_falls_back(self, raw):
        arg = NUMBER.adapt(raw)
        assert arg.value == 0.0
        assert arg.used_default is True

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("TRUE", True), ("1", True), ("yes", True),
         ("false", False), ("No", False), ("0", False)],
    )
    def test_boolean_parses(self, raw, expected):
        arg = BOOLEAN.adapt(raw)
        assert arg.value is expected
        assert arg.used_default is False

    def test_boolean_falls_back(self):
        arg = BOOLEAN.adapt("maybe")
        assert arg.value is False
        assert arg.used_default is True

    def test_string_never_falls_back(self):
        arg = STRING.adapt("")
        assert arg.value == ""
        assert arg.used_default is False

    def test_custom_adapter(self):
        csv = ArgumentAdapter(
            "list",
            lambda raw: [int(x) for x in raw.split(",")],
            list,
        )
        assert csv.adapt("1,2,3").value == [1, 2, 3]
        bad = csv.adapt("1,two")
        assert bad.value == []
        assert bad.used_default is True


class TestAdapterForLabel:
    @pytest.mark.parametrize(
        "label, adapter",
        [("string", STRING), ("String", STRING), ("int", INTEGER), ("Int", INTEGER),
         ("integer", INTEGER), ("Double", NUMBER), ("number", NUMBER),
         ("float", NUMBER), ("Bool", BOOLEAN), ("boolean", BOOLEAN)],
    )
    def test_known_labels(self, label, adapter):
        assert adapter_for_label(label) is adapter

    def test_unknown_label_passes_through(self):
        assert adapter_for_label("Person") is STRING


class TestAdaptArguments:
    def test_positional_order(self):
        params = [param("n", "integer"), param("s"), param("f", "number")]
        adapted = adapt_arguments(params, ["5", "five", "5.5"])
        assert [a.value for a in adapted] == [5, "five", 5.5]

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="functool.tools.adapters"):
            adapted = adapt_arguments([param("count", "integer")], ["lots"])
        assert adapted[0].used_default is True
        assert "count" in caplog.text
        assert "'lots'" in caplog.text


class TestNonStringInput:
    def test_integer_from_int(self):
        arg = INTEGER.adapt(5)
        assert arg.value == 5
        assert arg.used_default is False
        assert arg.raw == "5"

    def test_boolean_from_bool(self):
        assert BOOLEAN.adapt(True).value is True

    def test_unparseable_non_string_falls_back(self):
        arg = INTEGER.adapt(None)
        assert arg.value == 0
        assert arg.used_default is True
