"""
Tests for DictPreferenceStore typed accessors.
"""
import pytest
from firefox_proxy import DictPreferenceStore

class TestDictPreferenceStore:
    def test_get_string_absent(self):
        """Absent keys read as an empty string."""
        prefs = DictPreferenceStore()
        assert prefs.get_string("network.proxy.http") == ""

    def test_get_string_value(self):
        prefs = DictPreferenceStore({"network.proxy.http": "proxy.example.com", "flag": True})
        assert prefs.get_string("network.proxy.http") == "proxy.example.com"
        assert prefs.get_string("flag") == "true"

    def test_get_int(self):
        prefs = DictPreferenceStore({"a": 3128, "b": "8080", "c": " 21 "})
        assert prefs.get_int("a", 80) == 3128
        assert prefs.get_int("b", 80) == 8080
        assert prefs.get_int("c", 80) == 21

    def test_get_int_default(self):
        """Missing, non-numeric and boolean values fall back to the default."""
        prefs = DictPreferenceStore({"bad": "abc", "flag": True})
        assert prefs.get_int("missing", 80) == 80
        assert prefs.get_int("bad", 80) == 80
        assert prefs.get_int("flag", 5) == 5

    @pytest.mark.parametrize("raw, expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("TRUE", True),
        ("1", True),
        ("false", False),
        ("0", False),
        (1, True),
        (0, False),
    ])
    def test_get_boolean(self, raw, expected):
        prefs = DictPreferenceStore({"flag": raw})
        assert prefs.get_boolean("flag", not expected) is expected

    def test_get_boolean_default(self):
        prefs = DictPreferenceStore()
        assert prefs.get_boolean("flag", True) is True
        assert prefs.get_boolean("flag", False) is False

    def test_contains(self):
        prefs = DictPreferenceStore({"network.proxy.type": 1})
        assert "network.proxy.type" in prefs
        assert "network.proxy.http" not in prefs

    def test_copies_source_mapping(self):
        """Later changes to the source dict do not leak into the store."""
        values = {"network.proxy.type": 1}
        prefs = DictPreferenceStore(values)
        values["network.proxy.type"] = 0
        assert prefs.get_int("network.proxy.type", 5) == 1

    @pytest.mark.parametrize("default", [True, False])
    def test_get_boolean_unrecognised_string(self, default):
        """Strings that are not a boolean spelling fall back to the default."""
        prefs = DictPreferenceStore({"flag": "maybe"})
        assert prefs.get_boolean("flag", default) is default
