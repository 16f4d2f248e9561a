import pytest

from resume_builder.ats.matcher import KeywordMatcher
from resume_builder.ats.models import Keyword, KeywordCategory, Importance


def _kw(term: str) -> Keyword:
    return Keyword(keyword=term, category=KeywordCategory.SKILL, importance=Importance.HIGH)


class TestKeywordMatcher:

    @pytest.fixture
    def matcher(self) -> KeywordMatcher:
        return KeywordMatcher()

    def test_resume_text_is_lowercase_values(self, matcher, full_resume):
        text = matcher.build_resume_text(full_resume)

        assert text == text.lower()
        assert "acme corp" in text
        assert "typescript" in text
        assert "computer science" in text

    def test_resume_text_excludes_keys_and_ids(self, matcher, full_resume):
        text = matcher.build_resume_text(full_resume)

        assert "personalinfo" not in text
        assert "fullname" not in text
        assert "exp1" not in text
        assert "sk1" not in text

    def test_partition_preserves_original_strings(self, matcher, full_resume):
        keywords = [_kw("JavaScript"), _kw("Kubernetes"), _kw("Docker")]
        matched, missing = matcher.match_keywords(full_resume, keywords)

        assert matched == ["JavaScript", "Docker"]
        assert missing == ["Kubernetes"]

    def test_sets_matched_flag_in_place(self, matcher, full_resume):
        keywords = [_kw("react"), _kw("golang")]
        matcher.match_keywords(full_resume, keywords)

        assert keywords[0].matched is True
        assert keywords[1].matched is False

    def test_substring_match_inside_longer_word(self, matcher, bare_resume):
        bare_resume.summary = "Built dashboards in javascript"
        keywords = [_kw("java")]
        matched, missing = matcher.match_keywords(bare_resume, keywords)

        assert matched == ["java"]
        assert missing == []

    def test_no_keywords(self, matcher, full_resume):
        assert matcher.match_keywords(full_resume, []) == ([], [])
