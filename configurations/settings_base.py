# configurations/settings_base.py
"""
Base configuration classes and environment handling.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class EnvironmentVariables:
    """
    This is for the environmental variables:
    """

    env_file_path: Optional[str] = ".env"

    # ***> Variable names read on top of the .env file <***
    USER_AGENT_VAR: str = "LEAGUE_SCRAPER_USER_AGENT"
    HEADLESS_VAR: str = "LEAGUE_SCRAPER_HEADLESS"
    ENVIRONMENT_VAR: str = "LEAGUE_SCRAPER_ENVIRONMENT"

    def load(self) -> bool:
        """
        Load the .env file into the process environment if it exists.

        Returns:
            True if a file was loaded
        """
        if self.env_file_path and Path(self.env_file_path).exists():
            load_dotenv(self.env_file_path)
            logging.getLogger(__name__).debug(
                "Loaded environment from: %s", self.env_file_path
            )
            return True
        return False


def get_env_flag(name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
