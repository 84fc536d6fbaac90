# pipelines/orchestrators/orchestrator_config.py
"""
Configuration constants and settings for orchestrator classes.
Centralizes all hardcoded values for better maintainability.
"""


class OrchestratorConfig:
    """
    Configuration constants for orchestrator operations.
    """

    # ***> Homepages listed without a scheme are loaded over https <***
    DEFAULT_URL_SCHEME: str = "https://"

    # ***> Directory markup <***
    OFFER_CONTAINER_XPATH: str = (
        "./ancestor::*[contains(concat(' ', normalize-space(@class), ' '), "
        "' club-search-offer ')][1]"
    )

    # ***> Progress reporting <***
    DIRECTORY_PROGRESS_INTERVAL: int = 5

    # ***> String formatting templates <***
    URL_DISPLAY_LENGTH: int = 80
    URL_ELLIPSIS: str = "..."
    ERROR_MESSAGE_LENGTH: int = 200
