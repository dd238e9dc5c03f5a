"""
Unit tests for responsive_images.config module.
"""

import importlib
import logging

import pytest

from responsive_images import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module under a patched environment, then restore it."""
    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config).Config
    
    yield _reload
    
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:
    """Test cases for environment-driven settings."""
    
    def test_defaults(self, reload_config, monkeypatch):
        monkeypatch.delenv("DEFAULT_IMAGE_SIZE", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        
        cfg = reload_config()
        
        assert cfg.DEFAULT_IMAGE_SIZE == "medium_large"
        assert cfg.LOG_LEVEL == "INFO"
    
    def test_log_level_is_normalised(self, reload_config):
        assert reload_config(LOG_LEVEL=" debug ").LOG_LEVEL == "DEBUG"
    
    def test_unknown_log_level_falls_back_to_info(self, reload_config):
        """Test that an unknown level name does not break logger setup."""
        cfg = reload_config(LOG_LEVEL="verbose")
        
        assert cfg.LOG_LEVEL == "INFO"
        logging.getLogger("responsive_images.config_test").setLevel(cfg.LOG_LEVEL)
    
    def test_default_size_from_env(self, reload_config):
        assert reload_config(DEFAULT_IMAGE_SIZE="large").DEFAULT_IMAGE_SIZE == "large"
