"""Test game configuration models and YAML loading."""

import pytest
from pydantic import ValidationError

from src.environment import DifficultyConfig, GameConfig, default_difficulties
from src.main import load_config


class TestDifficultyConfig:
    """Validation of a single difficulty."""

    def test_valid(self):
        """A well-formed difficulty validates."""
        d = DifficultyConfig(grid_size=8, words=["CAT"], rival_interval=1.8, rival_skill=0.3)
        assert d.rival_prefer_longest == 0.0

    def test_skill_out_of_range(self):
        """Skill is a probability."""
        with pytest.raises(ValidationError):
            DifficultyConfig(grid_size=8, words=["CAT"], rival_interval=1.0, rival_skill=1.5)

    def test_interval_must_be_positive(self):
        """A zero interval would tick forever."""
        with pytest.raises(ValidationError):
            DifficultyConfig(grid_size=8, words=["CAT"], rival_interval=0, rival_skill=0.5)

    def test_grid_smaller_than_word(self):
        """The grid must be at least as wide as the longest word."""
        with pytest.raises(ValidationError):
            DifficultyConfig(grid_size=4, words=["ELEPHANT"], rival_interval=1.0, rival_skill=0.5)

    def test_empty_word_list(self):
        """A difficulty needs at least one word."""
        with pytest.raises(ValidationError):
            DifficultyConfig(grid_size=8, words=[], rival_interval=1.0, rival_skill=0.5)


class TestGameConfig:
    """The full game configuration."""

    def test_defaults(self):
        """Defaults reproduce the standard three-level table."""
        config = GameConfig()
        assert list(config.difficulties) == ["Easy", "Medium", "Hard"]
        assert config.difficulty("Easy").grid_size == 8
        assert config.difficulty("Hard").rival_prefer_longest == 0.6
        assert config.human_hold_seconds == 0.4
        assert config.rival_hold_seconds == 0.7
        assert config.history_limit == 8

    def test_configs_do_not_share_tables(self):
        """Each configuration owns its difficulty table."""
        a = GameConfig()
        b = GameConfig()
        a.difficulties["Easy"].words.append("ZEBRA")
        assert "ZEBRA" not in b.difficulties["Easy"].words
        assert "ZEBRA" not in default_difficulties()["Easy"].words

    def test_unknown_difficulty(self):
        """Looking up an unknown label raises."""
        with pytest.raises(ValueError):
            GameConfig().difficulty("Nightmare")

    def test_empty_table(self):
        """An empty difficulty table is rejected."""
        with pytest.raises(ValidationError):
            GameConfig(difficulties={})


class TestLoadConfig:
    """Loading configuration from YAML."""

    def test_load_yaml(self, tmp_path):
        """Keys in the file override the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "seed: 42\n"
            "rival_hold_seconds: 1.0\n"
            "history_path: results/test.json\n"
            "difficulties:\n"
            "  Kids:\n"
            "    grid_size: 5\n"
            "    words: [CAT, DOG]\n"
            "    rival_interval: 3.0\n"
            "    rival_skill: 0.1\n"
        )
        config = load_config(str(path))
        assert config.seed == 42
        assert config.rival_hold_seconds == 1.0
        assert config.human_hold_seconds == 0.4
        assert config.history_path == "results/test.json"
        assert list(config.difficulties) == ["Kids"]
        assert config.difficulty("Kids").words == ["CAT", "DOG"]

    def test_empty_file_uses_defaults(self, tmp_path):
        """An empty YAML file gives the default configuration."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert list(load_config(str(path)).difficulties) == ["Easy", "Medium", "Hard"]

    def test_missing_file(self, tmp_path):
        """A missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_values(self, tmp_path):
        """Invalid values surface as validation errors."""
        path = tmp_path / "config.yaml"
        path.write_text("human_hold_seconds: -1\n")
        with pytest.raises(ValidationError):
            load_config(str(path))
