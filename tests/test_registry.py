import pytest

from inilayer import IniConfig, registry
from inilayer.registry import GlobalAlreadySet, GlobalNotSet, global_config, set_global


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch):
    monkeypatch.setattr(registry, "_config", None)


class TestRegistry:
    def test_access_before_set(self):
        with pytest.raises(GlobalNotSet):
            global_config()

    def test_set_once(self):
        conf = IniConfig().set_default("a", "1")
        set_global(conf)
        assert global_config() is conf

    def test_second_set_returns_rejected_config(self):
        first = IniConfig().set_default("a", "1")
        second = IniConfig().set_default("a", "2")
        set_global(first)
        with pytest.raises(GlobalAlreadySet) as excinfo:
            set_global(second)
        assert excinfo.value.config is second
        assert global_config() is first
