import pytest

from thds.rootfind import config

A = config.item("test_config.A", 1)
B = config.item("test_config.B", 2)
C = config.item("test_config.C", 3, parse=int)
UNSET: config.ConfigItem[str] = config.item("test_config.unset")


def test_nested_global_defaults():
    config.set_global_defaults({"test_config.A": 10, "test_config": {"C": "20"}})
    assert A() == 10
    assert C() == 20
    assert B() == 2


def test_unregistered_name_is_an_error():
    with pytest.raises(KeyError, match="Config item test_config.E is not registered"):
        config.set_global_defaults({"test_config.E": 10})


def test_local_override_wins_then_reverts():
    B.set_global(5)
    with B.set_local(7):
        assert B() == 7
    assert B() == 5


def test_unconfigured_item_raises():
    with pytest.raises(config.UnconfiguredError):
        UNSET()


def test_name_collision():
    with pytest.raises(config.ConfigNameCollisionError):
        config.item("test_config.A", 99)


def test_env_var_read_at_registration(monkeypatch):
    monkeypatch.setenv("TEST_CONFIG_FROM_ENV", "42")
    from_env = config.item("test-config.from_env", 0, parse=int)
    assert from_env() == 42


def test_show_all_config_includes_rootfind_marker():
    import thds.rootfind  # noqa: F401

    assert config.show_all_config()["thds.rootfind.marker"] == "Cargo.lock"


def test_show_all_config_leaves_out_unconfigured_items():
    shown = config.show_all_config()
    assert "test_config.unset" not in shown
    assert shown["test_config.B"] == B()
