"""Tests for configuration loading."""

from todo_parser.config import Config, ConfigModel, get_config, load_config, save_config


class TestConfigModel:
    """Test YAML serialization of the config model."""

    def test_defaults(self):
        config = ConfigModel()

        assert config.use_emoji is True
        assert config.no_color is False
        assert config.show_summary is True
        assert config.tree_indent == 2
        assert config.encoding == "utf-8"

    def test_yaml_round_trip(self):
        config = ConfigModel(use_emoji=False, tree_indent=4, encoding="latin-1")
        assert ConfigModel.from_yaml(config.to_yaml()) == config

    def test_unknown_keys_are_ignored(self):
        config = ConfigModel.from_yaml("use_emoji: false\ntheme: dark\n")
        assert config.use_emoji is False

    def test_empty_yaml(self):
        assert ConfigModel.from_yaml("") == ConfigModel()


class TestConfigLoading:
    """Test the cached configuration manager."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")

        assert config == ConfigModel()
        assert not (tmp_path / "missing.yaml").exists()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        save_config(ConfigModel(show_summary=False), path)

        assert load_config(path).show_summary is False
        assert get_config().show_summary is False

    def test_invalid_file_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")

        assert load_config(path) == ConfigModel()

    def test_malformed_yaml_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("use_emoji: [unclosed\n")

        assert load_config(path) == ConfigModel()

    def test_reset(self, tmp_path):
        load_config(tmp_path / "missing.yaml")
        Config.reset()

        assert Config._instance is None
