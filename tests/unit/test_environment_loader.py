"""Unit tests for environment variable loading."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from src.infrastructure.config.environment import (
    DEFAULT_CONFIG_PATH,
    get_env,
    get_env_bool,
    load_environment_variables,
    resolve_config_path,
)


class TestEnvironmentVariableLoading:
    """Tests for load_environment_variables function."""
    
    def test_load_env_file_automatic_detection(self, tmp_path: Path, monkeypatch):
        """Test that .env file is automatically detected in current directory."""
        monkeypatch.chdir(tmp_path)
        env_file = tmp_path / ".env"
        env_file.write_text("DOCACCESS_LOG_LEVEL=DEBUG\n")
        
        with patch("src.infrastructure.config.environment.load_dotenv") as mock_load:
            load_environment_variables()
            
            mock_load.assert_called_once()
            call_args = mock_load.call_args
            assert Path(call_args[0][0]) == env_file
            # Verify override=False (system env takes precedence)
            assert call_args[1].get("override", True) is False
    
    def test_load_env_file_parent_directories(self, tmp_path: Path, monkeypatch):
        """Test that .env file is searched in parent directories."""
        nested_dir = tmp_path / "level1" / "level2"
        nested_dir.mkdir(parents=True)
        monkeypatch.chdir(nested_dir)
        env_file = tmp_path / ".env"
        env_file.write_text("DOCACCESS_LOG_LEVEL=DEBUG\n")
        
        with patch("src.infrastructure.config.environment.load_dotenv") as mock_load:
            load_environment_variables()
            
            assert Path(mock_load.call_args[0][0]) == env_file
    
    def test_load_env_file_explicit_path_missing(self, tmp_path: Path):
        """Test that a missing explicit .env path is ignored."""
        with patch("src.infrastructure.config.environment.load_dotenv") as mock_load:
            load_environment_variables(dotenv_path=tmp_path / "missing.env")
            
            mock_load.assert_not_called()
    
    def test_system_env_takes_precedence(self, tmp_path: Path, monkeypatch):
        """Test that existing environment variables are not overridden by .env."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("DOCACCESS_TEST_KEY=from_file\n")
        monkeypatch.setenv("DOCACCESS_TEST_KEY", "from_system")
        
        load_environment_variables(dotenv_path=env_file)
        
        assert get_env("DOCACCESS_TEST_KEY") == "from_system"


class TestEnvironmentAccessors:
    """Tests for get_env, get_env_bool and resolve_config_path."""
    
    def test_get_env_default(self, monkeypatch):
        monkeypatch.delenv("DOCACCESS_UNSET_KEY", raising=False)
        assert get_env("DOCACCESS_UNSET_KEY", "fallback") == "fallback"
    
    @pytest.mark.parametrize("value", ["true", "1", "YES", " on "])
    def test_get_env_bool_true(self, monkeypatch, value):
        monkeypatch.setenv("DOCACCESS_FLAG", value)
        assert get_env_bool("DOCACCESS_FLAG") is True
    
    @pytest.mark.parametrize("value", ["false", "0", "no", "OFF"])
    def test_get_env_bool_false(self, monkeypatch, value):
        monkeypatch.setenv("DOCACCESS_FLAG", value)
        assert get_env_bool("DOCACCESS_FLAG", default=True) is False
    
    def test_get_env_bool_unrecognized_uses_default(self, monkeypatch):
        monkeypatch.setenv("DOCACCESS_FLAG", "maybe")
        assert get_env_bool("DOCACCESS_FLAG", default=True) is True
        monkeypatch.delenv("DOCACCESS_FLAG")
        assert get_env_bool("DOCACCESS_FLAG", default=True) is True
    
    def test_resolve_config_path_precedence(self, monkeypatch):
        monkeypatch.delenv("DOCACCESS_CONFIG", raising=False)
        assert resolve_config_path() == Path(DEFAULT_CONFIG_PATH)
        
        monkeypatch.setenv("DOCACCESS_CONFIG", "conf/custom.toml")
        assert resolve_config_path() == Path("conf/custom.toml")
        assert resolve_config_path("explicit.toml") == Path("explicit.toml")
