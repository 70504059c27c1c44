"""Tests for Config loading and Settings resolution"""
import logging
from pathlib import Path

import pytest
import yaml

from nameit.config import CONFIG_FILENAME, Config, Settings, default_config_path
from nameit.errors import ConfigError, ConfigNotFoundError
from nameit.generator import FormatOptions
from nameit.lists import Mode


def write_config(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestConfig:
    """Test Config file loading"""

    def test_default_path_under_home(self, isolated_env):
        """Default config lives at $HOME/.nameit.yaml"""
        assert default_config_path() == isolated_env / CONFIG_FILENAME

    def test_missing_default_is_ignored(self):
        """No default file means no values"""
        config = Config()
        assert config.get("count") is None
        assert "count" not in config

    def test_reads_default_file(self, isolated_env):
        """Values are read from the default file when present"""
        write_config(isolated_env / CONFIG_FILENAME, {"count": 4})
        assert Config().get("count") == 4

    def test_explicit_missing_file(self, temp_dir):
        """An explicit path that does not exist is an error"""
        with pytest.raises(ConfigNotFoundError):
            Config(temp_dir / "nope.yaml")

    def test_hyphen_and_underscore_keys(self, temp_dir):
        """Keys may use hyphens or underscores"""
        path = write_config(temp_dir / "c.yaml", {"append-random": True, "random_length": 5})
        config = Config(path)
        assert config.get("append_random") is True
        assert config.get("append-random") is True
        assert config.get("random-length") == 5
        assert "random_length" in config

    def test_empty_file(self, temp_dir):
        """An empty file holds no values"""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert Config(path).get("mode") is None

    def test_invalid_yaml(self, temp_dir):
        """Malformed YAML raises ConfigError"""
        path = temp_dir / "bad.yaml"
        path.write_text("count: [1, 2\n")
        with pytest.raises(ConfigError, match="Failed to load config"):
            Config(path)

    def test_non_mapping(self, temp_dir):
        """A top-level list is not a valid config"""
        path = write_config(temp_dir / "list.yaml", ["a", "b"])
        with pytest.raises(ConfigError, match="mapping"):
            Config(path)


class TestSettingsResolve:
    """Test Settings.resolve precedence and coercion"""

    def test_defaults(self):
        """No overrides and no config gives defaults"""
        settings = Settings.resolve()
        assert settings == Settings()
        assert settings.mode is Mode.modern
        assert settings.count == 1
        assert settings.output == "text"

    def test_config_values(self, temp_dir):
        """Config values replace defaults"""
        path = write_config(temp_dir / "c.yaml", {
            "mode": "heroku",
            "count": "3",
            "prefix": "app",
            "separator": "_",
            "output": "json",
            "append-random": "yes",
            "random-chars": "ab",
            "random-length": 2,
            "adjectives-list": ["red", "blue"],
            "nouns-list": "cat, dog",
            "adjectives-file": "~/adj.txt",
        })
        settings = Settings.resolve({}, Config(path))
        assert settings.mode is Mode.heroku
        assert settings.count == 3
        assert settings.prefix == "app"
        assert settings.separator == "_"
        assert settings.output == "json"
        assert settings.append_random is True
        assert settings.random_chars == "ab"
        assert settings.random_length == 2
        assert settings.adjectives_list == ("red", "blue")
        assert settings.nouns_list == ("cat", "dog")
        assert settings.adjectives_file == Path.home() / "adj.txt"
        assert settings.nouns_file is None

    def test_overrides_beat_config(self, temp_dir):
        """Explicit values win over the config file"""
        path = write_config(temp_dir / "c.yaml", {"count": 9, "prefix": "cfg"})
        settings = Settings.resolve({"count": 2}, Config(path))
        assert settings.count == 2
        assert settings.prefix == "cfg"

    def test_mode_uses_its_own_key(self, temp_dir):
        """mode is read from 'mode', independent of 'count'"""
        path = write_config(temp_dir / "c.yaml", {"mode": "heroku", "count": 5})
        settings = Settings.resolve({}, Config(path))
        assert settings.mode is Mode.heroku
        assert settings.count == 5

    def test_numeric_separator_kept_as_string(self, temp_dir):
        """YAML scalars are converted to strings for string options"""
        path = write_config(temp_dir / "c.yaml", {"separator": 0})
        assert Settings.resolve({}, Config(path)).separator == "0"

    @pytest.mark.parametrize("data", [
        {"count": "many"},
        {"count": -1},
        {"count": True},
        {"random-length": "x"},
        {"mode": "classic"},
        {"append-random": "maybe"},
        {"nouns-list": {"a": 1}},
        {"prefix": ["a"]},
    ])
    def test_invalid_values(self, temp_dir, data):
        """Values that cannot be converted raise ConfigError"""
        path = write_config(temp_dir / "c.yaml", data)
        with pytest.raises(ConfigError):
            Settings.resolve({}, Config(path))

    def test_unknown_override(self):
        """Overrides must name a real setting"""
        with pytest.raises(ValueError):
            Settings.resolve({"colour": "red"})

    def test_format_options(self):
        """format_options carries the formatting fields"""
        settings = Settings(prefix="p", separator=".", append_random=True, random_chars="z", random_length=1)
        assert settings.format_options() == FormatOptions(
            separator=".", prefix="p", append_random=True, random_chars="z", random_length=1,
        )


class TestWordSourcePrecedence:
    """Test that word sources resolve per kind across layers"""

    def test_override_file_clears_config_list(self, temp_dir):
        """A file given explicitly wins over a config list for the same kind"""
        path = write_config(temp_dir / "c.yaml", {"adjectives-list": ["fromconfig"]})
        settings = Settings.resolve({"adjectives_file": "a.txt"}, Config(path))
        assert settings.adjectives_list == ()
        assert settings.adjectives_file == Path("a.txt")

    def test_override_mode_clears_config_sources(self, temp_dir):
        """An explicit mode drops list and file values from the config"""
        path = write_config(temp_dir / "c.yaml", {
            "adjectives-list": ["a"],
            "nouns-file": "n.txt",
            "count": 4,
        })
        settings = Settings.resolve({"mode": "heroku"}, Config(path))
        assert settings.mode is Mode.heroku
        assert settings.adjectives_list == ()
        assert settings.nouns_file is None
        assert settings.count == 4

    def test_environment_between_overrides_and_config(self, temp_dir):
        """Environment values beat config but lose to overrides"""
        path = write_config(temp_dir / "c.yaml", {"count": 9, "prefix": "cfg", "separator": "."})
        settings = Settings.resolve({"count": 1}, Config(path), {"count": 5, "prefix": "env"})
        assert settings.count == 1
        assert settings.prefix == "env"
        assert settings.separator == "."

    def test_override_file_clears_environment_list(self):
        """Explicit sources win over environment sources for the same kind"""
        settings = Settings.resolve({"nouns_file": "n.txt"}, None, {"nouns_list": ["fromenv"]})
        assert settings.nouns_list == ()
        assert settings.nouns_file == Path("n.txt")

    def test_other_kind_untouched(self, temp_dir):
        """Sources for one kind do not clear the other kind"""
        path = write_config(temp_dir / "c.yaml", {"nouns-list": ["fromconfig"]})
        settings = Settings.resolve({"adjectives_list": ["quiet"]}, Config(path))
        assert settings.adjectives_list == ("quiet",)
        assert settings.nouns_list == ("fromconfig",)

    def test_same_layer_keeps_both(self, temp_dir):
        """List and file from the same layer are both kept; the list is used first"""
        path = write_config(temp_dir / "c.yaml", {"adjectives-list": ["a"], "adjectives-file": "a.txt"})
        settings = Settings.resolve({}, Config(path))
        assert settings.adjectives_list == ("a",)
        assert settings.adjectives_file == Path("a.txt")

    def test_unknown_environment_key(self):
        """Environment values must name a real setting"""
        with pytest.raises(ValueError):
            Settings.resolve({}, None, {"colour": "red"})


class TestConfigNotice:
    """Test the notice printed when a config file is used"""

    def test_config_file_reported(self, temp_dir, caplog):
        """Loading a file reports its path at WARNING so it shows by default"""
        path = write_config(temp_dir / "c.yaml", {"count": 2})
        with caplog.at_level(logging.WARNING, logger="nameit.config"):
            Config(path)
        assert f"Using config file: {path}" in caplog.text

    def test_missing_default_not_reported(self, caplog):
        """No notice when no config file exists"""
        with caplog.at_level(logging.WARNING, logger="nameit.config"):
            Config()
        assert "Using config file" not in caplog.text
