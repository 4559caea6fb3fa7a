# careerdocs/ats/live.py
import logging
import threading
from threading import Lock
from typing import Callable, Optional, Union

from careerdocs.ats.models import DocumentType
from careerdocs.ats.scorer import ATSScorer, ScoreResult, score_or_none

logger = logging.getLogger(__name__)


class DebouncedScorer:
    """
    Re-score a document while it is being edited.

    Each submit() restarts a quiet-period timer; only the last submission
    in a burst is scored. Results from submissions that were superseded
    while scoring are dropped instead of delivered.
    """

    def __init__(
        self,
        callback: Callable[[Optional[ScoreResult]], None],
        debounce_seconds: float = 0.8,
        scorer: Optional[ATSScorer] = None
    ):
        """
        Args:
            callback: Receives each fresh result, or None when scoring failed
            debounce_seconds: Quiet period before scoring runs
            scorer: Shared scorer instance
        """
        self.callback = callback
        self.debounce_seconds = debounce_seconds
        self.scorer = scorer or ATSScorer()

        self._lock = Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._running = 0
        self.latest: Optional[ScoreResult] = None

    @property
    def is_calculating(self) -> bool:
        with self._lock:
            return self._running > 0

    @property
    def is_pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def submit(
        self,
        document_text: str,
        job_description: str,
        document_type: Union[DocumentType, str] = DocumentType.RESUME
    ) -> bool:
        """
        Schedule scoring after the quiet period

        Returns:
            False when either text is empty and nothing was scheduled
        """
        if not document_text or not job_description:
            self.cancel()
            return False

        with self._lock:
            self._cancel_timer()
            self._generation += 1
            timer = threading.Timer(
                self.debounce_seconds,
                self._run,
                args=(self._generation, document_text, job_description, document_type),
            )
            timer.daemon = True
            self._timer = timer
            timer.start()

        return True

    def cancel(self):
        """Drop the pending run and any result still being computed"""
        with self._lock:
            self._cancel_timer()
            self._generation += 1

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _run(self, generation: int, document_text: str, job_description: str, document_type):
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            self._running += 1

        try:
            result = score_or_none(self.scorer, document_text, job_description, document_type)
        finally:
            with self._lock:
                self._running -= 1
                stale = generation != self._generation

        if stale:
            logger.debug(f"Dropping stale ATS result (generation {generation})")
            return

        self.latest = result
        self.callback(result)
