"""Tests for the config module."""

from argparse import Namespace

import pytest
import yaml

from index_format.config import (
    DEFAULT_IGNORABLE_LIST_NAMES,
    LOG_LEVELS,
    Config,
    ConfigError,
    load_config,
    load_yaml_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("INDEX_FORMAT_IGNORABLE_LISTS", raising=False)
    monkeypatch.delenv("INDEX_FORMAT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("INDEX_FORMAT_TIMESTAMPS_ONLY", raising=False)


def _args(**overrides):
    values = {"ignore_list": None, "verbose": False, "debug": False, "timestamps_only": False}
    values.update(overrides)
    return Namespace(**values)


class TestConfigDefaults:
    def test_default_names(self):
        assert Config().ignorable_list_names == ("ads", "INBOX")

    def test_default_level(self):
        assert Config().log_level == "WARNING"

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.log_level = "DEBUG"

    def test_log_levels(self):
        assert LOG_LEVELS == ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TestLoadYamlConfig:
    def test_no_path(self):
        assert load_yaml_config(None) == {}

    def test_missing_file(self, tmp_path):
        assert load_yaml_config(str(tmp_path / "nope.yml")) == {}

    def test_reads_mapping(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text(yaml.dump({"ignorable_list_names": ["ads", "spam"]}))
        assert load_yaml_config(str(path)) == {"ignorable_list_names": ["ads", "spam"]}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_yaml_config(str(path)) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("ignorable_list_names: [ads\n")
        with pytest.raises(ConfigError):
            load_yaml_config(str(path))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- ads\n- spam\n")
        with pytest.raises(ConfigError):
            load_yaml_config(str(path))


class TestLoadConfig:
    def test_defaults(self):
        cfg = load_config()
        assert cfg.ignorable_list_names == DEFAULT_IGNORABLE_LIST_NAMES
        assert cfg.log_level == "WARNING"

    def test_yaml_replaces_names(self):
        cfg = load_config(yaml_data={"ignorable_list_names": ["spam", "bulk"]})
        assert cfg.ignorable_list_names == ("spam", "bulk")

    def test_yaml_single_name(self):
        cfg = load_config(yaml_data={"ignorable_list_names": "spam"})
        assert cfg.ignorable_list_names == ("spam",)

    def test_yaml_level(self):
        assert load_config(yaml_data={"log_level": "info"}).log_level == "INFO"

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("INDEX_FORMAT_IGNORABLE_LISTS", "one, two,,")
        cfg = load_config(yaml_data={"ignorable_list_names": ["spam"]})
        assert cfg.ignorable_list_names == ("one", "two")

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("INDEX_FORMAT_LOG_LEVEL", "error")
        assert load_config().log_level == "ERROR"

    def test_cli_names_appended(self):
        cfg = load_config(_args(ignore_list=["spam", "ads"]))
        assert cfg.ignorable_list_names == ("ads", "INBOX", "spam")

    def test_verbose(self):
        assert load_config(_args(verbose=True)).log_level == "INFO"

    def test_debug_wins_over_verbose(self):
        assert load_config(_args(verbose=True, debug=True)).log_level == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ConfigError):
            load_config(yaml_data={"log_level": "LOUD"})

    def test_non_string_name(self):
        with pytest.raises(ConfigError):
            load_config(yaml_data={"ignorable_list_names": ["ads", 7]})


class TestTimestampsOnly:
    def test_default_off(self):
        assert load_config().timestamps_only is False

    def test_yaml(self):
        assert load_config(yaml_data={"timestamps_only": True}).timestamps_only is True

    def test_env(self, monkeypatch):
        monkeypatch.setenv("INDEX_FORMAT_TIMESTAMPS_ONLY", "yes")
        assert load_config().timestamps_only is True

    def test_env_false(self, monkeypatch):
        monkeypatch.setenv("INDEX_FORMAT_TIMESTAMPS_ONLY", "0")
        assert load_config(yaml_data={"timestamps_only": True}).timestamps_only is False

    def test_cli_flag(self):
        assert load_config(_args(timestamps_only=True)).timestamps_only is True
