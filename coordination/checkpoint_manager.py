# coordination/checkpoint_manager.py
"""
Checkpointing for the club crawl - makes a long batch run resumable
"""

import json
import os
import tempfile
import time
from pathlib import Path
from typing import Dict, List, Set, Union

from exceptions import CheckpointError
from logger import get_logger
from models import ClubLeagueResult

logger = get_logger("checkpoint")


class CheckpointManager:
    """
    Owns the in-memory results of a crawl and their durable snapshot.

    The checkpoint file holds ``{"results": [...]}``. It is rewritten in
    full every ``batch_size`` newly recorded clubs and deleted only when
    a run has processed every source club. Its presence therefore means
    "resumable, incomplete run".
    """

    def __init__(
        self,
        checkpoint_path: Union[str, Path],
        batch_size: int = 10,
        write_retries: int = 3,
        retry_delay: float = 1.0,
    ):
        """
        Args:
            checkpoint_path: Location of the checkpoint file
            batch_size: Newly recorded clubs between two snapshots
            write_retries: Attempts per snapshot before giving up
            retry_delay: Seconds between attempts
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be greater than 0")
        if write_retries <= 0:
            raise ValueError("write_retries must be greater than 0")

        self.checkpoint_path = Path(checkpoint_path)
        self.batch_size = batch_size
        self.write_retries = write_retries
        self.retry_delay = retry_delay

        self._results: Dict[str, ClubLeagueResult] = {}
        self._unsaved = 0
        self.resumed_count = 0

    # ***> State <***

    @property
    def results(self) -> List[ClubLeagueResult]:
        return list(self._results.values())

    @property
    def processed_ids(self) -> Set[str]:
        return set(self._results)

    @property
    def exists(self) -> bool:
        return self.checkpoint_path.exists()

    def is_processed(self, club_id: str) -> bool:
        return club_id in self._results

    # ***> Loading <***

    def load(self) -> int:
        """
        Load a previous run's results if a checkpoint exists.

        Repeated ids keep their first occurrence.

        Returns:
            Number of clubs already processed

        Raises:
            CheckpointError: If the file exists but cannot be read
        """
        if not self.exists:
            logger.debug("No checkpoint at %s", self.checkpoint_path)
            return 0

        try:
            with open(self.checkpoint_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            entries = data.get("results", []) if isinstance(data, dict) else []
            loaded = [ClubLeagueResult.from_dict(entry) for entry in entries]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise CheckpointError(str(self.checkpoint_path), e, operation="read") from e

        duplicates = 0
        for result in loaded:
            if result.id in self._results:
                duplicates += 1
                continue
            self._results[result.id] = result

        if duplicates:
            logger.warning("Dropped %d duplicate entries from checkpoint", duplicates)

        self.resumed_count = len(self._results)
        logger.info(
            "Resuming: %d clubs already processed (%s)",
            self.resumed_count,
            self.checkpoint_path,
        )
        return self.resumed_count

    # ***> Recording <***

    def record(self, result: ClubLeagueResult) -> bool:
        """
        Add one finished club and snapshot when a batch is complete.

        Args:
            result: Result of a club processed in this run

        Returns:
            True if a snapshot was written

        Raises:
            CheckpointError: If the snapshot cannot be written
        """
        if result.id in self._results:
            logger.warning("Club %s recorded twice, keeping the latest result", result.id)
        self._results[result.id] = result
        self._unsaved += 1

        if self._unsaved >= self.batch_size:
            self.save()
            return True
        return False

    def save(self) -> None:
        """
        Overwrite the checkpoint with a full snapshot of all results.

        The snapshot goes to a temporary file that is renamed over the
        checkpoint, so the previous snapshot survives a failed write.

        Raises:
            CheckpointError: If every attempt fails
        """
        payload = {"results": [result.to_dict() for result in self._results.values()]}
        last_error = None

        for attempt in range(1, self.write_retries + 1):
            try:
                self._write_atomically(payload)
                self._unsaved = 0
                logger.info(
                    "--- Saved progress: %d clubs -> %s ---",
                    len(self._results),
                    self.checkpoint_path,
                )
                return
            except (OSError, TypeError, ValueError) as e:
                last_error = e
                logger.warning(
                    "Checkpoint write attempt %d/%d failed: %s",
                    attempt,
                    self.write_retries,
                    e,
                )
                if attempt < self.write_retries and self.retry_delay > 0:
                    time.sleep(self.retry_delay)

        raise CheckpointError(
            str(self.checkpoint_path), last_error, attempts=self.write_retries
        )

    def _write_atomically(self, payload: dict) -> None:
        self.checkpoint_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.checkpoint_path.parent,
            prefix=f".{self.checkpoint_path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.checkpoint_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    # ***> Completion <***

    def finalize(self, run_complete: bool) -> None:
        """
        Close out the run.

        A complete run deletes the checkpoint. An incomplete one (club cap
        reached, interrupted) snapshots so the next run resumes.

        Raises:
            CheckpointError: If the final snapshot cannot be written
        """
        if not run_complete:
            self.save()
            return

        if self.exists:
            try:
                self.checkpoint_path.unlink()
                logger.info("Run complete, removed checkpoint %s", self.checkpoint_path)
            except OSError as e:
                raise CheckpointError(
                    str(self.checkpoint_path), e, operation="delete"
                ) from e
