"""
Section filter tests - category selection over the record sequence.
"""

from practice_review.core.records import QuestionData, QuestionRecord
from practice_review.models.section_filter import Category, count_by_category, filter_records


def _record(record_id, section):
    return QuestionRecord.from_dict({
        '_id': record_id,
        'questionData': {
            'question': f"Question {record_id}",
            'section': section,
            'answers': {'a': 'x', 'b': 'y'},
            'correctAnswer': 'a',
        },
        'selectedAnswer': 'b',
    })


def _unchecked_record(record_id, section):
    # Built directly so tags outside the known set reach the filter
    return QuestionRecord(
        id=record_id,
        question_data=QuestionData(
            question_text=f"Question {record_id}",
            section=section,
            answers={'a': 'x', 'b': 'y'},
            correct_answer_letter='a',
        ),
    )


class TestFilterRecords:
    """Test filter_records()."""

    def test_all_returns_input_unchanged(self, sample_records):
        result = filter_records(sample_records, Category.ALL)
        assert result is sample_records

    def test_math_keeps_math_records_in_order(self, sample_records):
        result = filter_records(sample_records, Category.MATH)
        assert [r.id for r in result] == ['1', '3', '5', '7']

    def test_language_keeps_language_records_in_order(self, sample_records):
        result = filter_records(sample_records, Category.LANGUAGE)
        assert [r.id for r in result] == ['2', '4', '6', '8']

    def test_int_values_are_accepted(self, sample_records):
        assert [r.id for r in filter_records(sample_records, 2)] == ['1', '3', '5', '7']

    def test_unknown_category_acts_as_all(self, sample_records):
        assert filter_records(sample_records, 99) is sample_records

    def test_input_is_not_modified(self, sample_records):
        before = list(sample_records)
        filter_records(sample_records, Category.MATH)
        assert sample_records == before

    def test_result_is_a_subsequence(self, sample_records):
        for category in Category:
            result = filter_records(sample_records, category)
            positions = [sample_records.index(r) for r in result]
            assert positions == sorted(positions)

    def test_categories_partition_the_records(self, sample_records):
        language = filter_records(sample_records, Category.LANGUAGE)
        math = filter_records(sample_records, Category.MATH)
        assert len(language) + len(math) == len(sample_records)
        assert not set(r.id for r in language) & set(r.id for r in math)

    def test_section_tags_compare_after_normalizing(self):
        records = [_record('a', ' toán '), _record('b', 'TIẾNG ANH')]
        assert [r.id for r in filter_records(records, Category.MATH)] == ['a']

    def test_section_tags_do_not_match_on_substrings(self):
        records = [
            _unchecked_record('a', 'TOÁN HỌC'),
            _unchecked_record('b', 'TIẾNG ANH 2'),
            _unchecked_record('c', 'TOÁ'),
            _record('d', 'TOÁN'),
            _record('e', 'TIẾNG ANH'),
        ]
        assert [r.id for r in filter_records(records, Category.MATH)] == ['d']
        assert [r.id for r in filter_records(records, Category.LANGUAGE)] == ['e']

    def test_empty_input(self):
        assert list(filter_records([], Category.MATH)) == []


class TestCountByCategory:
    """Test count_by_category()."""

    def test_counts(self, sample_records):
        counts = count_by_category(sample_records)
        assert counts[Category.ALL] == 8
        assert counts[Category.LANGUAGE] == 4
        assert counts[Category.MATH] == 4

    def test_empty(self):
        counts = count_by_category([])
        assert all(count == 0 for count in counts.values())
