"""
TaskRunner - Background repository calls with QThreadPool

Pattern: Background work with QRunnable workers, completion delivered on
the GUI thread through queued signals. Callers never touch shared state
from a worker thread.
"""

import itertools
import logging
import time
from typing import Any, Callable, Dict, Optional, Tuple

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

from ..config import Config

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[str], None]


class PersistenceTaskSignals(QObject):
    """Signals for PersistenceTask"""
    succeeded = pyqtSignal(int, object, float)  # task_id, result, elapsed_ms
    failed = pyqtSignal(int, str, float)  # task_id, error_message, elapsed_ms


class PersistenceTask(QRunnable):
    """
    Background task running one blocking repository call

    Usage:
        task = PersistenceTask(task_id, repository.update_note, (record_id, text))
        threadpool.start(task)
    """

    def __init__(self, task_id: int, func: Callable, args: Tuple = ()):
        super().__init__()
        self.task_id = task_id
        self.func = func
        self.args = args
        self.signals = PersistenceTaskSignals()
        self.start_time = time.time()

    def run(self):
        """Execute the call and report the outcome"""
        try:
            result = self.func(*self.args)
        except Exception as e:
            elapsed_ms = (time.time() - self.start_time) * 1000
            self.signals.failed.emit(self.task_id, str(e) or e.__class__.__name__, elapsed_ms)
            return

        elapsed_ms = (time.time() - self.start_time) * 1000
        self.signals.succeeded.emit(self.task_id, result, elapsed_ms)


class TaskRunner(QObject):
    """
    Runs repository calls off the GUI thread

    Callbacks run on the thread that owns the runner (the GUI thread), in
    completion order. There is no cancellation: a caller that no longer
    cares about a result must ignore it in its callback.

    Usage:
        runner = get_task_runner()
        runner.submit(repo.update_note, record_id, text,
                      on_success=self._on_saved, on_failure=self._on_save_failed)
    """

    task_finished = pyqtSignal(int, bool)  # task_id, succeeded

    def __init__(self, thread_pool: Optional[QThreadPool] = None, parent=None):
        super().__init__(parent)

        if thread_pool is None:
            thread_pool = QThreadPool()
            thread_pool.setMaxThreadCount(Config.PERSISTENCE_THREAD_COUNT)
        self.thread_pool = thread_pool

        self._ids = itertools.count(1)

        # task_id -> (signals, on_success, on_failure). Holding the signals
        # object keeps it alive until the queued completion is delivered.
        self._pending: Dict[int, Tuple[PersistenceTaskSignals, Optional[SuccessCallback], Optional[FailureCallback]]] = {}

    def submit(
        self,
        func: Callable,
        *args,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None
    ) -> int:
        """
        Start func(*args) on the pool

        Args:
            func: Blocking callable
            *args: Arguments for func
            on_success: Called with func's return value
            on_failure: Called with the error message if func raised

        Returns:
            Task ID
        """
        task_id = next(self._ids)
        task = PersistenceTask(task_id, func, args)

        task.signals.succeeded.connect(self._on_task_succeeded)
        task.signals.failed.connect(self._on_task_failed)

        self._pending[task_id] = (task.signals, on_success, on_failure)
        self.thread_pool.start(task)
        return task_id

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def wait_for_done(self, msecs: int = -1) -> bool:
        """Block until the pool is idle (completions still need the event loop)"""
        return self.thread_pool.waitForDone(msecs)

    def _on_task_succeeded(self, task_id: int, result: Any, elapsed_ms: float):
        entry = self._pending.pop(task_id, None)
        if entry is None:
            return
        _, on_success, _ = entry
        logger.debug(f"Task {task_id} succeeded in {elapsed_ms:.1f}ms")
        if on_success is not None:
            on_success(result)
        self.task_finished.emit(task_id, True)

    def _on_task_failed(self, task_id: int, error_message: str, elapsed_ms: float):
        entry = self._pending.pop(task_id, None)
        if entry is None:
            return
        _, _, on_failure = entry
        logger.warning(f"Task {task_id} failed after {elapsed_ms:.1f}ms: {error_message}")
        if on_failure is not None:
            on_failure(error_message)
        self.task_finished.emit(task_id, False)


# Singleton instance
_task_runner_instance: Optional[TaskRunner] = None


def get_task_runner() -> TaskRunner:
    """
    Get global TaskRunner singleton

    Returns:
        Global TaskRunner instance
    """
    global _task_runner_instance
    if _task_runner_instance is None:
        _task_runner_instance = TaskRunner()
    return _task_runner_instance


__all__ = ['TaskRunner', 'PersistenceTask', 'get_task_runner']
