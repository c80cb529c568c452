import os
import sys

import pytest
from unittest.mock import MagicMock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PyQt6.QtWidgets import QApplication

from practice_review.core.records import QuestionRecord
from practice_review.services.record_store import RecordStore
from practice_review.services.repositories import SAMPLE_ERROR_LOGS


class ManualTaskRunner:
    """
    Stand-in for TaskRunner that runs nothing until told to.

    Tests release completions one at a time, in any order, to reproduce
    in-flight and out-of-order situations deterministically.
    """

    def __init__(self):
        self.tasks = {}
        self._next_id = 1

    def submit(self, func, *args, on_success=None, on_failure=None):
        task_id = self._next_id
        self._next_id += 1
        self.tasks[task_id] = (func, args, on_success, on_failure)
        return task_id

    @property
    def pending_count(self):
        return len(self.tasks)

    @property
    def pending_ids(self):
        return sorted(self.tasks)

    def complete(self, task_id=None):
        """Run a task (oldest by default) and deliver its outcome."""
        if task_id is None:
            task_id = self.pending_ids[0]
        func, args, on_success, on_failure = self.tasks.pop(task_id)
        try:
            result = func(*args)
        except Exception as e:
            if on_failure is not None:
                on_failure(str(e) or e.__class__.__name__)
            return None
        if on_success is not None:
            on_success(result)
        return result

    def fail(self, task_id=None, message="backend unavailable"):
        """Deliver a failure without running the task."""
        if task_id is None:
            task_id = self.pending_ids[0]
        _, _, _, on_failure = self.tasks.pop(task_id)
        if on_failure is not None:
            on_failure(message)

    def run_all(self):
        while self.tasks:
            self.complete()


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session (offscreen)."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def runner():
    return ManualTaskRunner()


@pytest.fixture
def sample_rows():
    import copy
    return copy.deepcopy(SAMPLE_ERROR_LOGS)


@pytest.fixture
def sample_records(sample_rows):
    return [QuestionRecord.from_dict(row) for row in sample_rows]


@pytest.fixture
def repository(sample_rows):
    """Mock implementing all three repository contracts."""
    repo = MagicMock()
    repo.fetch_all.return_value = sample_rows
    repo.update_note.return_value = True
    repo.update_status.return_value = True
    return repo


@pytest.fixture
def loaded_store(qapp, repository, runner):
    """RecordStore with the eight sample records loaded."""
    store = RecordStore(repository, runner=runner)
    store.load()
    runner.run_all()
    assert len(store) == 8
    return store
