import pytest
from unittest.mock import MagicMock

from resume_builder.ai.ollama_client import OllamaClient
from resume_builder.config import ScoringConfig
from resume_builder.ai.suggestion_enricher import OllamaSuggestionProvider
from resume_builder.ats.models import Keyword, KeywordCategory, Importance
from resume_builder.ats.scorer import ATSScorer
from resume_builder.exceptions import SuggestionError, LLMProviderError


class TestOllamaSuggestionProvider:

    @pytest.fixture
    def ollama(self) -> MagicMock:
        return MagicMock(spec=OllamaClient)

    @pytest.fixture
    def provider(self, ollama) -> OllamaSuggestionProvider:
        return OllamaSuggestionProvider(ollama)

    def test_prompt_lists_counts_and_missing(self, provider):
        prompt = provider.build_prompt(3, 8, ["docker", "aws"])

        assert "3/8" in prompt
        assert "docker, aws" in prompt

    def test_returns_suggestions(self, provider, ollama):
        ollama.generate_json.return_value = {"suggestions": ["Add Docker", " Mention AWS "]}

        assert provider.suggest(1, 3, ["docker", "aws"]) == ["Add Docker", "Mention AWS"]

    def test_returns_every_suggestion(self, provider, ollama):
        ollama.generate_json.return_value = {"suggestions": [f"s{i}" for i in range(9)]}

        assert len(provider.suggest(0, 9, ["x"])) == 9

    @pytest.mark.parametrize("max_ai_suggestions, expected", [(5, 5), (3, 3)])
    def test_scorer_caps_suggestions(self, ollama, bare_resume, max_ai_suggestions, expected):
        ollama.generate_json.return_value = {"suggestions": [f"s{i}" for i in range(9)]}
        config = ScoringConfig(max_ai_suggestions=max_ai_suggestions)
        scorer = ATSScorer(config=config, suggestion_provider=OllamaSuggestionProvider(ollama))

        score = scorer.calculate_score(
            bare_resume, [Keyword("docker", KeywordCategory.SKILL, Importance.HIGH)]
        )

        assert score.suggestions == [f"s{i}" for i in range(expected)]

    def test_no_response_raises(self, provider, ollama):
        ollama.generate_json.return_value = None

        with pytest.raises(LLMProviderError):
            provider.suggest(0, 1, ["x"])

    @pytest.mark.parametrize("payload", [
        {},
        {"suggestions": []},
        {"suggestions": "Add Docker"},
        {"suggestions": [1, 2]},
        {"suggestions": ["   "]},
    ])
    def test_malformed_response_raises(self, provider, ollama, payload):
        ollama.generate_json.return_value = payload

        with pytest.raises(SuggestionError):
            provider.suggest(0, 1, ["x"])

    def test_scorer_falls_back_when_backend_down(self, ollama, bare_resume):
        ollama.generate_json.return_value = None
        scorer = ATSScorer(suggestion_provider=OllamaSuggestionProvider(ollama))

        score = scorer.calculate_score(
            bare_resume, [Keyword("docker", KeywordCategory.SKILL, Importance.HIGH)]
        )

        assert score.suggestions == [
            'Consider adding experience or skills related to "docker"'
        ]
