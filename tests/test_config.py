"""Tests for configuration loading."""

from pathlib import Path

from taskpal.config import Config, ConfigModel, get_config, load_config, save_config


class TestConfigModel:
    """Test the configuration model."""

    def test_defaults(self, isolated_config):
        config = ConfigModel()

        assert config.data_dir == str(isolated_config / ".taskpal")
        assert Path(config.data_dir).is_dir()
        assert config.get_storage_path() == isolated_config / ".taskpal" / "tasks.txt"
        assert config.log_level == "WARNING"

    def test_yaml_round_trip(self, tmp_path):
        config = ConfigModel(data_dir=str(tmp_path / "data"), storage_file="mine.txt", no_color=True)

        restored = ConfigModel.from_yaml(config.to_yaml())

        assert restored == config

    def test_unknown_keys_are_ignored(self, tmp_path):
        yaml_str = f"data_dir: {tmp_path}\ntheme: dark\n"

        config = ConfigModel.from_yaml(yaml_str)

        assert config.data_dir == str(tmp_path)


class TestConfigManager:
    """Test the cached configuration manager."""

    def test_load_creates_default_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"

        config = load_config(config_path)

        assert config_path.exists()
        assert get_config() is config

    def test_load_existing_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        save_config(ConfigModel(data_dir=str(tmp_path), prompt="$ "), config_path)

        config = Config.reload(config_path)

        assert config.prompt == "$ "
        assert config.data_dir == str(tmp_path)

    def test_broken_file_falls_back_to_defaults(self, tmp_path, isolated_config):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n")

        config = load_config(config_path)

        assert config.data_dir == str(isolated_config / ".taskpal")
