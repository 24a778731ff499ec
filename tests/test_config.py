"""
Tests for configuration loading.
"""

import pytest

from wallclock.config import AppConfig, DisplayConfig
from wallclock.domain.exceptions import ConfigError


class TestAppConfig:
    """Tests for AppConfig."""
    
    def test_defaults(self):
        """Test the built-in defaults."""
        config = AppConfig()
        
        assert config.timezone == "Europe/Berlin"
        assert config.display == DisplayConfig(zero_pad=False)
        assert config.log_level == "WARNING"
    
    def test_load_from_yaml(self, tmp_path):
        """Test loading a valid YAML file."""
        config_path = tmp_path / "wallclock.yaml"
        config_path.write_text(
            "timezone: America/New_York\n"
            "log_level: debug\n"
            "display:\n"
            "  zero_pad: true\n",
            encoding="utf-8",
        )
        
        config = AppConfig.load_from_yaml(config_path)
        
        assert config.timezone == "America/New_York"
        assert config.log_level == "DEBUG"
        assert config.display.zero_pad is True
    
    def test_empty_file_uses_defaults(self, tmp_path):
        """Test that an empty file yields the defaults."""
        config_path = tmp_path / "wallclock.yaml"
        config_path.write_text("", encoding="utf-8")
        
        assert AppConfig.load_from_yaml(config_path) == AppConfig()
    
    def test_missing_file_raises_error(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")
    
    def test_invalid_yaml_raises_error(self, tmp_path):
        """Test that malformed YAML raises ConfigError."""
        config_path = tmp_path / "wallclock.yaml"
        config_path.write_text("timezone: [unclosed\n", encoding="utf-8")
        
        with pytest.raises(ConfigError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)
    
    def test_non_mapping_root_raises_error(self, tmp_path):
        """Test that a list at the root is rejected."""
        config_path = tmp_path / "wallclock.yaml"
        config_path.write_text("- Europe/Berlin\n", encoding="utf-8")
        
        with pytest.raises(ConfigError, match="mapping at the root"):
            AppConfig.load_from_yaml(config_path)
    
    @pytest.mark.parametrize("content", ["timezone: Mars/Base\n", "log_level: LOUD\n"])
    def test_invalid_values_raise_error(self, tmp_path, content):
        """Test that validation failures surface as ConfigError."""
        config_path = tmp_path / "wallclock.yaml"
        config_path.write_text(content, encoding="utf-8")
        
        with pytest.raises(ConfigError, match="Invalid configuration"):
            AppConfig.load_from_yaml(config_path)
    
    def test_load_or_default_without_file(self, tmp_path, monkeypatch):
        """Test falling back to defaults when no file exists."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("wallclock.config.get_default_config_path", lambda: tmp_path / "wallclock.yaml")
        
        assert AppConfig.load_or_default() == AppConfig()
    
    def test_load_or_default_explicit_missing_path(self, tmp_path):
        """Test that an explicit path must exist."""
        with pytest.raises(FileNotFoundError):
            AppConfig.load_or_default(tmp_path / "missing.yaml")
