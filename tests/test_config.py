import pytest

from pagesort.core import config as config_mod
from pagesort.core.config import ConfigError, SortConfig, config_from_mapping, load_config


@pytest.fixture()
def no_default_config(tmp_path, monkeypatch):
    monkeypatch.delenv("PAGESORT_CONFIG", raising=False)
    monkeypatch.setattr(config_mod.paths, "DEFAULT_CONFIG", tmp_path / "missing.yaml")


def test_defaults_without_config_file(no_default_config):
    assert load_config() == SortConfig()


def test_load_explicit_path(tmp_path):
    path = tmp_path / "pagesort.yaml"
    path.write_text("collation: codepoint\nsticky_breaks_segments: false\n", encoding="utf-8")
    config = load_config(path)
    assert config.collation == "codepoint"
    assert config.sticky_breaks_segments is False
    assert config.group_children is True


def test_env_var_points_to_config(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("drop_blank: true\n", encoding="utf-8")
    monkeypatch.setenv("PAGESORT_CONFIG", str(path))
    assert load_config().drop_blank is True


def test_default_config_file_is_used(tmp_path, monkeypatch):
    path = tmp_path / "pagesort.yaml"
    path.write_text("group_children: false\n", encoding="utf-8")
    monkeypatch.delenv("PAGESORT_CONFIG", raising=False)
    monkeypatch.setattr(config_mod.paths, "DEFAULT_CONFIG", path)
    assert load_config().group_children is False


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == SortConfig()


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("collation: [locale\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_rejects_unknown_keys_and_values():
    with pytest.raises(ConfigError, match="Unknown configuration keys"):
        config_from_mapping({"colation": "locale"})
    with pytest.raises(ConfigError, match="Unknown collation"):
        config_from_mapping({"collation": "klingon"})
    with pytest.raises(ConfigError, match="true or false"):
        config_from_mapping({"drop_blank": "yes please"})
    with pytest.raises(ConfigError, match="mapping"):
        config_from_mapping(["collation"])


def test_with_overrides_skips_none():
    config = SortConfig().with_overrides(collation="codepoint", drop_blank=None)
    assert config.collation == "codepoint"
    assert config.drop_blank is False
    with pytest.raises(ConfigError):
        SortConfig().with_overrides(collation="nope")
