"""
Orchestrator module initialization.
Exports main orchestrator classes and utilities.
"""

from .base_orchestrator import BaseOrchestrator
from .crawl_orchestrator import ClubWebsiteOrchestrator, CrawlRun
from .directory_orchestrator import DirectoryOrchestrator
from .orchestrator_config import OrchestratorConfig
from .orchestrator_utils import OrchestratorUtils

__all__ = [
    "BaseOrchestrator",
    "ClubWebsiteOrchestrator",
    "CrawlRun",
    "DirectoryOrchestrator",
    "OrchestratorConfig",
    "OrchestratorUtils",
]
