"""
RecordStore tests - loading, failures and committed note updates.
"""

import pytest

from practice_review.core.review_states import ReviewStatus
from practice_review.services.record_store import RecordStore


@pytest.fixture
def store(qapp, repository, runner):
    return RecordStore(repository, runner=runner)


class TestLoad:
    """Test RecordStore.load()."""

    def test_load_success(self, store, runner):
        changes = []
        loading = []
        store.records_changed.connect(changes.append)
        store.loading_changed.connect(loading.append)

        store.load()
        assert store.is_loading
        assert len(store) == 0

        runner.run_all()

        assert [r.id for r in store.records] == [str(i) for i in range(1, 9)]
        assert not store.is_loading
        assert changes == [8]
        assert loading == [True, False]

    def test_load_failure_leaves_empty_sequence(self, store, repository, runner):
        failures = []
        store.load_failed.connect(failures.append)
        repository.fetch_all.side_effect = ConnectionError("server down")

        store.load()
        runner.run_all()

        assert store.records == ()
        assert not store.is_loading
        assert failures == ["server down"]

    def test_failed_reload_clears_previous_records(self, loaded_store, repository, runner):
        repository.fetch_all.side_effect = RuntimeError("boom")
        loaded_store.load()
        runner.run_all()
        assert len(loaded_store) == 0

    def test_failure_is_logged(self, store, repository, runner, caplog):
        repository.fetch_all.side_effect = RuntimeError("boom")
        store.load()
        with caplog.at_level("ERROR", logger="practice_review"):
            runner.run_all()
        assert "Error fetching error logs" in caplog.text

    @pytest.mark.parametrize("question_data", [
        ['x'],
        {'section': 5},
        {'section': 'TOÁN', 'answers': 3, 'correctAnswer': 'a'},
    ])
    def test_wrongly_typed_row_fails_the_load(self, store, repository, runner, question_data):
        failures = []
        store.load_failed.connect(failures.append)
        repository.fetch_all.return_value = [{'_id': '1', 'questionData': question_data}]

        store.load()
        runner.run_all()

        assert len(store) == 0
        assert len(failures) == 1
        assert not store.is_loading

    def test_invalid_row_fails_the_load(self, store, repository, runner, sample_rows):
        failures = []
        store.load_failed.connect(failures.append)
        sample_rows[3]['questionData']['correctAnswer'] = 'z'

        store.load()
        runner.run_all()

        assert len(store) == 0
        assert len(failures) == 1

    def test_duplicate_ids_fail_the_load(self, store, repository, runner, sample_rows):
        sample_rows[1]['_id'] = sample_rows[0]['_id']
        store.load()
        runner.run_all()
        assert len(store) == 0

    @pytest.mark.parametrize("payload", [None, "rows", {"_id": "1"}, 42, 3.5, object()])
    def test_non_list_payload_fails_the_load(self, store, repository, runner, payload):
        failures = []
        store.load_failed.connect(failures.append)
        repository.fetch_all.return_value = payload
        store.load()
        runner.run_all()
        assert len(store) == 0
        assert len(failures) == 1

    def test_accepts_record_instances(self, store, repository, runner, sample_records):
        repository.fetch_all.return_value = sample_records
        store.load()
        runner.run_all()
        assert store.get('1') is sample_records[0]

    def test_newer_load_supersedes_older(self, store, repository, runner, sample_rows):
        # Completions run fetch_all in delivery order: the newer load runs first
        repository.fetch_all.side_effect = [sample_rows, sample_rows[:2]]

        store.load()
        store.load()
        first, second = runner.pending_ids

        runner.complete(second)
        assert len(store) == 8

        runner.complete(first)
        assert len(store) == 8


class TestAccess:
    """Test lookup helpers."""

    def test_get_and_contains(self, loaded_store):
        assert loaded_store.get('3').id == '3'
        assert '3' in loaded_store
        assert loaded_store.get('missing') is None
        assert 'missing' not in loaded_store

    def test_records_is_a_snapshot(self, loaded_store):
        assert isinstance(loaded_store.records, tuple)

    def test_status_defaults_to_needs_review(self, loaded_store):
        assert loaded_store.status_for('1') is ReviewStatus.NEEDS_REVIEW


class TestCommits:
    """Test apply_note() and apply_status()."""

    def test_apply_note_preserves_identity_and_order(self, loaded_store):
        before = loaded_store.records
        record = loaded_store.get('5')

        assert loaded_store.apply_note('5', 'new note')

        after = loaded_store.records
        assert [r.id for r in after] == [r.id for r in before]
        assert all(a is b for a, b in zip(before, after))
        assert record.note == 'new note'

    def test_apply_note_emits_record_updated(self, loaded_store):
        updated = []
        loaded_store.record_updated.connect(updated.append)
        loaded_store.apply_note('2', 'text')
        assert updated == ['2']

    def test_apply_note_unknown_record(self, loaded_store):
        assert not loaded_store.apply_note('missing', 'text')

    def test_apply_note_touches_only_the_note(self, loaded_store):
        record = loaded_store.get('1')
        question_data = record.question_data
        loaded_store.apply_note('1', 'changed')
        assert record.question_data is question_data
        assert record.selected_answer_letter == 'a'

    def test_apply_status(self, loaded_store):
        updates = []
        loaded_store.status_updated.connect(lambda record_id, status: updates.append((record_id, status)))

        loaded_store.apply_status('4', ReviewStatus.REVIEWED)

        assert loaded_store.status_for('4') is ReviewStatus.REVIEWED
        assert loaded_store.statuses == {'4': ReviewStatus.REVIEWED}
        assert updates == [('4', 'reviewed')]
