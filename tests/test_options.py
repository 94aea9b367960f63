"""Tests for the Defaults registry."""

import pytest

from globalkv import DEFAULT_OPTION_NAMES, DefaultOptions, Defaults, InvalidOption


class TestDefaultsBasic:
    def test_initial_values(self):
        d = Defaults()
        assert d.snapshot() == DefaultOptions(
            protected=False, force=False, silent=False, on_update=None, on_delete=None
        )

    def test_option_names(self):
        assert DEFAULT_OPTION_NAMES == {
            "protected",
            "force",
            "silent",
            "on_update",
            "on_delete",
        }

    def test_set_and_get(self):
        d = Defaults()
        d.set("protected", True)
        assert d.get("protected") is True
        assert d.snapshot().protected is True

    def test_set_callback(self):
        def cb(key, new, old):
            pass

        d = Defaults()
        d.set("on_update", cb)
        assert d.snapshot().on_update is cb

    def test_no_cross_field_implication(self):
        d = Defaults()
        d.set("protected", True)
        assert d.get("force") is False


class TestDefaultsSnapshot:
    def test_snapshot_is_copy(self):
        d = Defaults()
        snap = d.snapshot()
        snap.protected = True
        assert d.get("protected") is False

    def test_snapshot_not_updated_later(self):
        d = Defaults()
        snap = d.snapshot()
        d.set("silent", True)
        assert snap.silent is False


class TestDefaultsReset:
    def test_reset(self):
        d = Defaults()
        d.set("protected", True)
        d.set("force", True)
        d.set("on_delete", lambda key, value: None)
        d.reset()
        assert d.snapshot() == DefaultOptions()

    def test_reset_to_constructor_values(self):
        d = Defaults(silent=True)
        d.set("silent", False)
        d.reset()
        assert d.get("silent") is True

    def test_reset_is_repeatable(self):
        d = Defaults()
        d.set("force", True)
        d.reset()
        d.set("force", True)
        d.reset()
        assert d.get("force") is False


class TestDefaultsResolve:
    def test_none_falls_back(self):
        d = Defaults()
        d.set("protected", True)
        assert d.resolve("protected", None) is True

    def test_explicit_value_wins(self):
        d = Defaults()
        d.set("protected", True)
        assert d.resolve("protected", False) is False


class TestDefaultsInvalid:
    def test_set_unknown(self):
        d = Defaults()
        with pytest.raises(InvalidOption, match="Unknown default option") as exc:
            d.set("extended", True)
        assert exc.value.name == "extended"

    def test_get_unknown(self):
        with pytest.raises(InvalidOption):
            Defaults().get("nope")

    def test_constructor_unknown(self):
        with pytest.raises(InvalidOption):
            Defaults(bogus=1)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Defaults().set("bogus", 1)
