#!/usr/bin/env python3
"""
Score a resume against a job description

Usage:
    resume-ats --resume data/resume.yaml --job data/jobs/frontend.txt
    resume-ats --resume data/resume.json --job data/jobs/frontend.txt --policy strict --json
    resume-ats --resume data/resume.yaml --job data/jobs/frontend.txt --ai --output reports/score.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from resume_builder.config import ScoringConfig, get_config, PRESETS
from resume_builder.exceptions import ResumeBuilderError
from resume_builder.normalizer import normalize_resume
from resume_builder.validator import ResumeValidator
from resume_builder.ats.analyzer import ATSAnalyzer
from resume_builder.ats.models import ScoreBreakdown
from resume_builder.ats.scorer import ATSScorer
from resume_builder.utils import setup_logging

logger = logging.getLogger(__name__)


def load_resume_data(resume_file: str) -> Dict[str, Any]:
    """Load raw resume data from a YAML or JSON file"""
    path = Path(resume_file)

    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {resume_file}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Resume file must contain a mapping: {resume_file}")

    return data


def load_job_description(job_file: str) -> str:
    path = Path(job_file)

    if not path.exists():
        raise FileNotFoundError(f"Job description file not found: {job_file}")

    return path.read_text(encoding='utf-8')


def build_scoring_config(args: argparse.Namespace) -> ScoringConfig:
    if args.config:
        return get_config(args.config)
    if args.policy:
        return ScoringConfig.preset(args.policy)
    return get_config()


def build_analyzer(args: argparse.Namespace, config: ScoringConfig) -> ATSAnalyzer:
    suggestion_provider = None
    keyword_extractor = None

    if args.ai:
        from resume_builder.ai import (
            OllamaClient, OllamaSuggestionProvider, OllamaKeywordExtractor
        )

        client = OllamaClient(
            base_url=args.ollama_host,
            model=args.ollama_model,
            timeout=args.ollama_timeout
        )
        suggestion_provider = OllamaSuggestionProvider(client)
        keyword_extractor = OllamaKeywordExtractor(client)

    return ATSAnalyzer(
        keyword_extractor=keyword_extractor,
        scorer=ATSScorer(config=config, suggestion_provider=suggestion_provider)
    )


def print_score_summary(score: ScoreBreakdown):
    """Print formatted score summary"""
    print("\n" + "=" * 70)
    print(f"{'ATS COMPATIBILITY SCORE':^70}")
    print("=" * 70)
    print()

    print(f"Overall Score: {score.overall_score}/100 ({score.grade})")
    print(f"Likely to pass screening: {'yes' if score.pass_threshold else 'no'}")
    print()

    print("Component Breakdown:")
    print(f"  Keywords:    {score.keyword_match_score:3d}/100  {'█' * (score.keyword_match_score // 10)}")
    print(f"  Format:      {score.format_score:3d}/100  {'█' * (score.format_score // 10)}")
    print(f"  Sections:    {score.section_completeness_score:3d}/100  {'█' * (score.section_completeness_score // 10)}")
    print()


def print_keywords(score: ScoreBreakdown):
    """Print matched and missing keywords"""
    print("=" * 70)
    print(f"KEYWORDS ({len(score.matched_keywords)}/{len(score.keywords)} matched)")
    print("=" * 70)
    print()

    for keyword in score.keywords:
        icon = '✓' if keyword.matched else '✗'
        print(f"  {icon} {keyword.keyword:<28} {keyword.category.value:<12} {keyword.importance.value}")
    print()


def print_suggestions(score: ScoreBreakdown):
    if not score.suggestions:
        return

    print("=" * 70)
    print("SUGGESTIONS")
    print("=" * 70)
    print()

    for i, suggestion in enumerate(score.suggestions, 1):
        print(f"  {i}. {suggestion}")
    print()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Score a resume against a job description'
    )
    parser.add_argument('--resume', required=True, help='Resume file (.yaml, .yml or .json)')
    parser.add_argument('--job', required=True, help='Job description text file')
    parser.add_argument('--policy', choices=sorted(PRESETS), help='Scoring preset')
    parser.add_argument('--config', help='Scoring config YAML (overrides --policy)')
    parser.add_argument('--no-validate', action='store_true',
                        help='Score even if required resume fields are missing')
    parser.add_argument('--ai', action='store_true',
                        help='Use Ollama for keyword extraction and suggestions')
    parser.add_argument('--ollama-host', default='http://localhost:11434')
    parser.add_argument('--ollama-model', default='llama3.2:3b')
    parser.add_argument('--ollama-timeout', type=float, default=10.0)
    parser.add_argument('--json', action='store_true', help='Print JSON instead of a report')
    parser.add_argument('--output', help='Write JSON result to file')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        resume = normalize_resume(load_resume_data(args.resume))
        job_description = load_job_description(args.job)
        config = build_scoring_config(args)
    except (OSError, ValueError, yaml.YAMLError, ResumeBuilderError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.no_validate:
        validator = ResumeValidator()
        is_valid, _ = validator.validate_resume(resume)
        if not is_valid:
            print(validator.generate_report(resume), file=sys.stderr)
            print("\nFix the errors above or pass --no-validate.", file=sys.stderr)
            return 1

    analyzer = build_analyzer(args, config)
    _, score = analyzer.analyze(job_description, resume)
    result = score.to_dict()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=2)
        logger.info(f"Wrote result to {output_path}")

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print_score_summary(score)
        print_keywords(score)
        print_suggestions(score)

    return 0


if __name__ == "__main__":
    sys.exit(main())
