"""Pydantic settings for docaccess.toml configuration."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.application.dto.accessibility import EnhancementOptions

from .environment import get_env, get_env_bool, load_environment_variables, resolve_config_path

logger = logging.getLogger(__name__)


class AltTextSettings(BaseModel):
    """Alt text resolution settings."""
    
    formula_label_for_blocks: bool = False  # Label page formula images "Mathematical formula"
    flag_generated_alt_text: bool = True  # Flag page images with generated alt text for review


class ReadingOrderSettings(BaseModel):
    """Reading order verification settings."""
    
    repair_incomplete: bool = False
    
    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable precedence."""
        load_environment_variables()
        
        if get_env("DOCACCESS_REPAIR_READING_ORDER") is not None:
            data["repair_incomplete"] = get_env_bool("DOCACCESS_REPAIR_READING_ORDER")
        
        super().__init__(**data)


class LoggingSettings(BaseModel):
    """Logging settings."""
    
    level: str = "INFO"
    verbose: bool = False
    
    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable precedence."""
        load_environment_variables()
        
        env_level = get_env("DOCACCESS_LOG_LEVEL")
        if env_level is not None:
            data["level"] = env_level
        
        super().__init__(**data)
    
    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Normalize and check the log level name."""
        level = str(v).upper().strip()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level
    
    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class Settings(BaseModel):
    """Main settings loaded from docaccess.toml."""
    
    alt_text: AltTextSettings = Field(default_factory=AltTextSettings)
    reading_order: ReadingOrderSettings = Field(default_factory=ReadingOrderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    
    @classmethod
    def from_toml(cls, toml_path: Path | str | None = None) -> "Settings":
        """
        Load settings from docaccess.toml file with environment variable precedence.
        
        Environment variables (system env > .env file) override TOML values.
        
        Args:
            toml_path: Path to docaccess.toml file (DOCACCESS_CONFIG or docaccess.toml if None)
        
        Returns:
            Settings instance with loaded configuration
        """
        load_environment_variables()
        
        explicit = toml_path is not None or get_env("DOCACCESS_CONFIG") is not None
        toml_path = resolve_config_path(toml_path)
        
        if not toml_path.exists():
            # Return defaults if file doesn't exist
            if explicit:
                logger.warning(
                    f"Configuration file not found: {toml_path}, using defaults",
                    extra={"config_path": str(toml_path)},
                )
            return cls()
        
        with toml_path.open("rb") as f:
            data = tomllib.load(f)
        
        return cls(
            alt_text=AltTextSettings(**data.get("alt_text", {})),
            reading_order=ReadingOrderSettings(**data.get("reading_order", {})),
            logging=LoggingSettings(**data.get("logging", {})),
        )
    
    def to_options(self) -> EnhancementOptions:
        """Build the options for the enhance_accessibility use case."""
        return EnhancementOptions(
            formula_label_for_blocks=self.alt_text.formula_label_for_blocks,
            flag_generated_alt_text=self.alt_text.flag_generated_alt_text,
            repair_incomplete_reading_order=self.reading_order.repair_incomplete,
        )
