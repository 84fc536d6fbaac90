# exceptions/checkpoint.py
"""
Custom exceptions for checkpoint persistence.
"""

from .extractor import LeagueScrapingError


class CheckpointError(LeagueScrapingError):
    """
    Raised when a checkpoint cannot be read, or cannot be written after all retries
    """

    def __init__(
        self,
        checkpoint_path: str,
        original_error: Exception,
        attempts: int = 1,
        operation: str = "write",
    ):
        message = (
            f"Checkpoint {operation} of {checkpoint_path} failed after "
            f"{attempts} attempt(s): {original_error}"
        )
        super().__init__(message)
        self.checkpoint_path = checkpoint_path
        self.original_error = original_error
        self.attempts = attempts
        self.operation = operation
