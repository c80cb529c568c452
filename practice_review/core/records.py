"""
Question records - the learner's previously answered incorrect questions.

A QuestionRecord is immutable except for its note, which only changes
when a review session commits a saved note (see RecordStore.apply_note).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..config import Config
from .exceptions import ValidationError


def normalize_section(section: Optional[str]) -> str:
    """Normalize a stored section tag for comparison (trim + upper-case)."""
    if not section:
        return ""
    return section.strip().upper()


@dataclass(frozen=True)
class QuestionData:
    """
    Question content.

    Attributes:
        question_text: Question body (rendering is up to the view)
        section: Section tag, normalized
        answers: Option letter -> option text, in display order
        correct_answer_letter: Key of the correct option in answers
    """
    question_text: str
    section: str
    answers: Mapping[str, str] = field(default_factory=dict)
    correct_answer_letter: str = ""


@dataclass
class QuestionRecord:
    """
    One incorrect answer plus the learner's response and note.

    Usage:
        record = QuestionRecord.from_dict(row)
        record.question_data.section  # 'TOÁN'
    """
    id: str
    question_data: QuestionData
    selected_answer_letter: str = ""
    is_correct: bool = False
    note: str = ""

    def is_option_correct(self, letter: str) -> bool:
        """Check whether an option letter is the correct answer."""
        return letter.lower() == self.question_data.correct_answer_letter

    def is_option_selected(self, letter: str) -> bool:
        """Check whether an option letter is the learner's answer."""
        return letter.lower() == self.selected_answer_letter

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuestionRecord':
        """
        Build a record from the data source's dict shape.

        Accepts both '_id' and 'id' for the identifier and the camelCase
        keys the question service returns.

        Raises:
            ValidationError: If the row breaks a record invariant
        """
        record_id = data.get('_id', data.get('id'))
        if record_id is None or str(record_id) == "":
            raise ValidationError("Record has no id", field='id', value=record_id)
        record_id = str(record_id)

        raw_question = data.get('questionData') or {}
        if not isinstance(raw_question, Mapping):
            raise ValidationError(
                f"Question data is not a mapping for record {record_id}",
                field='questionData', value=type(raw_question).__name__
            )

        raw_section = raw_question.get('section')
        if raw_section is not None and not isinstance(raw_section, str):
            raise ValidationError(
                f"Section is not text for record {record_id}",
                field='section', value=raw_section
            )
        section = normalize_section(raw_section)
        if section not in Config.SECTION_TAGS:
            raise ValidationError(
                f"Unknown section for record {record_id}",
                field='section', value=raw_question.get('section')
            )

        raw_answers = raw_question.get('answers') or {}
        if not isinstance(raw_answers, Mapping):
            raise ValidationError(
                f"Answers are not a mapping for record {record_id}",
                field='answers', value=type(raw_answers).__name__
            )

        answers = {}
        for letter, text in raw_answers.items():
            key = str(letter).strip().lower()
            if key not in Config.OPTION_LETTERS:
                raise ValidationError(
                    f"Invalid option letter for record {record_id}",
                    field='answers', value=letter
                )
            answers[key] = "" if text is None else str(text)

        correct = str(raw_question.get('correctAnswer', '')).strip().lower()
        if correct not in answers:
            raise ValidationError(
                f"Correct answer is not one of the options for record {record_id}",
                field='correctAnswer', value=raw_question.get('correctAnswer')
            )

        question_data = QuestionData(
            question_text=str(raw_question.get('question') or ''),
            section=section,
            answers=answers,
            correct_answer_letter=correct,
        )

        return cls(
            id=record_id,
            question_data=question_data,
            selected_answer_letter=str(data.get('selectedAnswer', '') or '').strip().lower(),
            is_correct=bool(data.get('isCorrect', False)),
            note=str(data.get('note') or ''),
        )


__all__ = ['QuestionData', 'QuestionRecord', 'normalize_section']
