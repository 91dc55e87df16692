"""Environment variable loading from .env files with precedence support."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "docaccess.toml"

# Recognized environment variables (all optional)
ENVIRONMENT_VARIABLES = {
    "DOCACCESS_CONFIG": "Custom configuration file path (defaults to docaccess.toml)",
    "DOCACCESS_LOG_LEVEL": "Log level override (DEBUG, INFO, WARNING, ERROR)",
    "DOCACCESS_REPAIR_READING_ORDER": "Repair incomplete reading orders (true/false)",
}


def load_environment_variables(dotenv_path: Path | str | None = None) -> None:
    """
    Load environment variables from .env file with automatic detection.
    
    Environment variables from system environment take precedence over .env
    file values (load_dotenv is called with override=False).
    
    Args:
        dotenv_path: Optional path to .env file. If None, searches for .env file in:
                     - Current working directory
                     - Parent directories (up to 3 levels)
    """
    if dotenv_path is None:
        current = Path.cwd()
        search_paths = [current / ".env", *(parent / ".env" for parent in current.parents[:3])]
        
        for path in search_paths:
            if path.exists():
                dotenv_path = path
                logger.debug(f"Loading .env file from: {path}")
                break
        
        if dotenv_path is None:
            load_dotenv(override=False)
            return
    
    dotenv_path = Path(dotenv_path)
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)
        logger.debug(f"Loaded .env file from: {dotenv_path}")
    else:
        logger.debug(f".env file not found at: {dotenv_path}")


def get_env(key: str, default: str | None = None) -> str | None:
    """
    Get environment variable value.
    
    Args:
        key: Environment variable name
        default: Default value if not found
    
    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """
    Get boolean environment variable.
    
    Accepts: 'true', '1', 'yes', 'on' (case-insensitive) → True
            'false', '0', 'no', 'off' (case-insensitive) → False
    Unset, empty or unrecognized values return the default.
    
    Args:
        key: Environment variable name
        default: Default value if not found
    
    Returns:
        Boolean value
    """
    value = os.getenv(key, "").lower().strip()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def resolve_config_path(config_path: Path | str | None = None) -> Path:
    """
    Resolve the configuration file path.
    
    Precedence: explicit argument > DOCACCESS_CONFIG > docaccess.toml
    """
    if config_path is not None:
        return Path(config_path)
    return Path(get_env("DOCACCESS_CONFIG") or DEFAULT_CONFIG_PATH)
