# resume_builder/config.py
import os
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional

import yaml

from resume_builder.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class FormatPolicy(Enum):
    """How contact-field presence is turned into a format score"""
    PARTIAL_CREDIT = "partial_credit"    # 100 / 70 (name+email) / 40
    ALL_OR_NOTHING = "all_or_nothing"    # 100 if name+email+phone, else 0


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and policies for ATS scoring"""

    # Overall score weights (must sum to 1.0)
    keyword_weight: float = 0.60
    format_weight: float = 0.25
    section_weight: float = 0.15

    format_policy: FormatPolicy = FormatPolicy.PARTIAL_CREDIT

    # Suggestion enrichment
    max_ai_suggestions: int = 5
    max_missing_for_ai: int = 10

    # Overall score at which a resume is considered likely to pass screening
    pass_threshold: int = 65

    def __post_init__(self):
        weights = (self.keyword_weight, self.format_weight, self.section_weight)
        if not all(_is_number(w) for w in weights):
            raise ConfigError(f"Scoring weights must be numbers, got {weights}")
        for name in ('max_ai_suggestions', 'max_missing_for_ai', 'pass_threshold'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if any(w < 0 for w in weights):
            raise ConfigError(f"Scoring weights must be non-negative, got {weights}")
        if abs(sum(weights) - 1.0) > 1e-6:
            raise ConfigError(f"Scoring weights must sum to 1.0, got {sum(weights):.4f}")
        if not isinstance(self.format_policy, FormatPolicy):
            try:
                object.__setattr__(self, 'format_policy', FormatPolicy(self.format_policy))
            except ValueError:
                raise ConfigError(f"Unknown format policy: {self.format_policy!r}")
        if self.max_ai_suggestions < 1:
            raise ConfigError("max_ai_suggestions must be at least 1")

    @property
    def weights(self) -> Dict[str, float]:
        return {
            'keyword': self.keyword_weight,
            'format': self.format_weight,
            'section': self.section_weight,
        }

    @classmethod
    def preset(cls, name: str) -> "ScoringConfig":
        """Get a named scoring preset ('standard' or 'strict')"""
        try:
            return PRESETS[name]
        except (KeyError, TypeError):
            raise ConfigError(
                f"Unknown scoring preset {name!r} (available: {', '.join(sorted(PRESETS))})"
            )

    @classmethod
    def from_dict(cls, data: Dict) -> "ScoringConfig":
        """
        Build configuration from a mapping

        A 'preset' key selects the base preset; remaining keys override it.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Scoring options must be a mapping, got {type(data).__name__}")

        data = dict(data)
        base = cls.preset(data.pop('preset', 'standard'))

        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"Unknown scoring options: {', '.join(sorted(unknown))}")

        return replace(base, **data)

    @classmethod
    def from_yaml(cls, path: str) -> "ScoringConfig":
        """Load configuration from YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Scoring config {path} must be a mapping")
        return cls.from_dict(data.get('scoring'))


PRESETS = {
    # Weighting used by the interactive analyzer
    'standard': ScoringConfig(),
    # Alternate weighting with all-or-nothing contact check
    'strict': ScoringConfig(
        keyword_weight=0.50,
        format_weight=0.25,
        section_weight=0.25,
        format_policy=FormatPolicy.ALL_OR_NOTHING,
    ),
}


def get_config(path: Optional[str] = None) -> ScoringConfig:
    """Get scoring configuration"""
    config_path = path or os.getenv('ATS_SCORING_CONFIG', 'config/scoring.yaml')

    if os.path.exists(config_path):
        logger.info(f"Loading scoring config from {config_path}")
        return ScoringConfig.from_yaml(config_path)
    return ScoringConfig.preset('standard')
