"""
LocalizationService tests - lookup fallbacks and language switching.
"""

import pytest

from practice_review.core.review_states import ERROR_MESSAGE_KEYS
from practice_review.config import Config
from practice_review.services.localization_service import LocalizationService, section_label_key
from practice_review.services.translations import TRANSLATIONS


@pytest.fixture
def i18n(qapp):
    return LocalizationService()


class TestResolve:
    """Test LocalizationService.resolve()."""

    def test_english_default(self, i18n):
        assert i18n.language == 'en'
        assert i18n.resolve('errorLogs.noteRequired') == "Please enter your notes before saving"

    def test_unknown_key_falls_back_to_default(self, i18n):
        assert i18n.resolve('does.not.exist', default="Fallback") == "Fallback"

    def test_unknown_key_without_default_returns_key(self, i18n):
        assert i18n.resolve('does.not.exist') == 'does.not.exist'

    def test_format_arguments(self, i18n):
        assert i18n.resolve('practice.pageOf', page=2, pages=5) == "Page 2 of 5"

    def test_missing_translation_falls_back_to_english(self, qapp):
        i18n = LocalizationService(tables={'en': {'only.en': "English"}, 'vi': {}})
        i18n.set_language('vi')
        assert i18n.resolve('only.en') == "English"

    def test_every_error_key_is_translated(self):
        for table in TRANSLATIONS.values():
            for key in ERROR_MESSAGE_KEYS.values():
                assert key in table

    def test_tables_have_the_same_keys(self):
        assert set(TRANSLATIONS['en']) == set(TRANSLATIONS['vi'])


class TestLanguage:
    """Test language switching."""

    def test_set_language_emits(self, i18n):
        changes = []
        i18n.language_changed.connect(changes.append)

        assert i18n.set_language('vi')

        assert changes == ['vi']
        assert i18n.resolve('practice.notes') == "Ghi chú"

    def test_same_language_is_noop(self, i18n):
        assert not i18n.set_language('en')

    def test_unsupported_language(self, i18n):
        assert not i18n.set_language('fr')
        assert i18n.language == 'en'

    def test_unsupported_initial_language_uses_default(self, qapp):
        assert LocalizationService(language='xx').language == Config.DEFAULT_LANGUAGE


class TestSectionLabels:
    """Test section tag display names."""

    def test_section_label_key(self):
        assert section_label_key('TOÁN') == 'scoreDetails.math'
        assert section_label_key(' tiếng anh ') == 'scoreDetails.readingWriting'
        assert section_label_key('HISTORY') is None

    def test_section_label(self, i18n):
        assert i18n.section_label('TOÁN') == "Math"
        assert i18n.section_label('HISTORY') == 'HISTORY'
