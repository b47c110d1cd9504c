"""Tests for configuration loading."""

import json

import pytest

from javagen.codegen.core.config import ConfigError, ConfigManager, GeneratorConfig, load_config


@pytest.fixture
def manager():
    return ConfigManager()


class TestGeneratorConfig:
    """Tests for the configuration dataclass."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.indent_size == 4
        assert not config.use_tabs
        assert config.implicit_packages == ["java.lang"]
        assert config.indent_unit == "    "

    def test_tab_unit(self):
        assert GeneratorConfig(use_tabs=True).indent_unit == "\t"


class TestConfigManager:
    """Tests for merging configuration sources."""

    def test_overrides(self, manager):
        config = manager.get_config({"indent_size": 2, "add_comments": False})
        assert config.indent_unit == "  "
        assert not config.add_comments

    def test_file_then_overrides(self, manager, tmp_path):
        path = tmp_path / "javagen.json"
        path.write_text(json.dumps({"indent_size": 8, "use_tabs": True}), encoding="utf-8")
        config = manager.get_config({"use_tabs": False}, path)
        assert config.indent_size == 8
        assert not config.use_tabs

    def test_unknown_keys_go_to_custom(self, manager):
        config = manager.get_config({"header": "generated"})
        assert config.custom == {"header": "generated"}

    def test_custom_not_shared_between_configs(self, manager):
        manager.get_config({"header": "generated"})
        assert manager.get_config().custom == {}

    def test_missing_file(self, manager, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            manager.get_config(config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, manager, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("indent_size: 2", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            manager.get_config(config_file=path)

    def test_invalid_json(self, manager, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            manager.get_config(config_file=path)

    def test_non_object(self, manager, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="JSON object"):
            manager.get_config(config_file=path)

    def test_save_and_load(self, manager, tmp_path):
        path = tmp_path / "saved.json"
        manager.save_config(GeneratorConfig(indent_size=3, custom={"header": "x"}), path)
        config = manager.get_config(config_file=path)
        assert config.indent_size == 3
        assert config.custom == {"header": "x"}

    def test_validate(self, manager):
        config = GeneratorConfig(indent_size=-1, implicit_packages=["java.lang", "1bad"])
        warnings = manager.validate_config(config)
        assert "Invalid indent_size: -1" in warnings
        assert "Invalid implicit package: 1bad" in warnings

    def test_load_config_helper(self):
        assert load_config({"use_tabs": True}).use_tabs
