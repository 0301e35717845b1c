"""
Tests for finkbase.config.load

Verify config loading/saving.
"""

import pytest
import tempfile
from pathlib import Path
from finkbase.config.load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)
from finkbase.config.schema import ParameterConfig
from finkbase.core.exceptions import ConfigError


class TestConfigFromDict:
    """Tests for config_from_dict."""
    
    def test_empty_dict_uses_defaults(self):
        cfg = config_from_dict({})
        assert cfg == ParameterConfig()
    
    def test_override(self):
        cfg = config_from_dict({"parameters": {"collision_policy": "error"}})
        assert cfg.collision_policy == "error"
    
    def test_unknown_field_raises(self):
        with pytest.raises(ConfigError, match="Invalid config"):
            config_from_dict({"parameters": {"reserved_prefix": "#"}})
    
    def test_bad_value_raises(self):
        with pytest.raises(ConfigError, match="Invalid collision_policy"):
            config_from_dict({"parameters": {"collision_policy": "first"}})
    
    def test_non_mapping_raises(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            config_from_dict(["parameters"])


class TestConfigToDict:
    """Tests for config_to_dict."""
    
    def test_roundtrip(self):
        cfg1 = ParameterConfig.strict()
        cfg2 = config_from_dict(config_to_dict(cfg1))
        assert cfg2 == cfg1


class TestLoadSaveConfig:
    """Tests for load_config and save_config."""
    
    def test_save_and_load(self):
        cfg1 = ParameterConfig(collision_policy="last")
        
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "finkbase.yaml"
            save_config(cfg1, path)
            cfg2 = load_config(path)
        
        assert cfg2 == cfg1
    
    def test_load_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ParameterConfig()
    
    def test_load_nonexistent_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("/nonexistent/path/finkbase.yaml")
    
    def test_load_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("parameters: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)
