# File: daybook/core/config_manager.py
"""
Centralized configuration management for Daybook.
Loads settings from environment variables (and an optional .env file).
"""

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from daybook.models.enums import Priority
from daybook.models.common import (
    DATE_FORMAT,
    TIME_FORMAT,
    TIMESTAMP_FORMAT,
    TIMESTAMP_FORMAT_12H,
)

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ['yes', 'true', '1', 'on', 'y', 't']


class Config:
    """Application configuration singleton."""
    
    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from daybook/core/
    LOGS_DIR = Path(os.getenv("DAYBOOK_LOGS_DIR", str(BASE_DIR / "logs")))
    
    # Logging
    LOG_LEVEL = os.getenv("DAYBOOK_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_flag("DAYBOOK_LOG_TO_FILE", False)
    
    # Store behaviour
    AUTO_ARCHIVE = _env_flag("DAYBOOK_AUTO_ARCHIVE", True)
    DEFAULT_PRIORITY = os.getenv("DAYBOOK_DEFAULT_PRIORITY", Priority.MEDIUM.value)
    
    # Text formats accepted from and shown to the user
    DATE_FORMAT = DATE_FORMAT
    TIME_FORMAT = TIME_FORMAT
    TIMESTAMP_FORMAT = TIMESTAMP_FORMAT
    TIMESTAMP_FORMAT_12H = TIMESTAMP_FORMAT_12H
    
    FILTER_ATTRIBUTES: List[str] = ["title", "location", "priority", "description", "date"]
    SORT_ATTRIBUTES: List[str] = ["date", "title", "priority"]
    
    @classmethod
    def log_level(cls) -> int:
        """Resolve LOG_LEVEL to a logging constant, falling back to INFO."""
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO
    
    @classmethod
    def default_priority(cls) -> Priority:
        """Priority preselected in the add form."""
        try:
            return Priority.parse(cls.DEFAULT_PRIORITY)
        except ValueError:
            return Priority.MEDIUM
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that configured values are usable."""
        errors = []
        
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"DAYBOOK_LOG_LEVEL is not a logging level: {cls.LOG_LEVEL}")
        
        try:
            Priority.parse(cls.DEFAULT_PRIORITY)
        except ValueError:
            errors.append(f"DAYBOOK_DEFAULT_PRIORITY is not a priority: {cls.DEFAULT_PRIORITY}")
        
        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False
        
        return True
