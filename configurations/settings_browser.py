# configurations/settings_browser.py
"""
Headless browser launch configuration.
"""

import os
from dataclasses import dataclass

from .settings_base import EnvironmentVariables, get_env_flag

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


@dataclass
class BrowserConfig:
    """
    Browser launch identity and page-load behaviour
    """

    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    # ***> "eager" returns once the DOM is parsed, like domcontentloaded <***
    page_load_strategy: str = "eager"
    window_size: str = "1366,900"
    page_load_timeout: float = 20.0

    @classmethod
    def from_env(cls, **overrides) -> "BrowserConfig":
        """
        Build a browser config, letting environment variables override defaults
        """
        config = cls(**overrides)
        config.user_agent = os.getenv(
            EnvironmentVariables.USER_AGENT_VAR, config.user_agent
        )
        config.headless = get_env_flag(
            EnvironmentVariables.HEADLESS_VAR, config.headless
        )
        return config

    def chrome_arguments(self) -> list:
        """
        Command-line switches passed to Chrome at launch
        """
        arguments = [
            "--no-sandbox",
            "--disable-dev-shm-usage",
            f"--user-agent={self.user_agent}",
            f"--window-size={self.window_size}",
        ]
        if self.headless:
            arguments.insert(0, "--headless=new")
        return arguments
