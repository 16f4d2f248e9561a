# resume_builder/web/api/analysis.py

import logging

from fastapi import APIRouter, Depends, Request

from resume_builder.ats.analyzer import ATSAnalyzer
from resume_builder.ats.suggestions import templated_suggestions
from resume_builder.normalizer import normalize_resume
from resume_builder.web.schemas import (
    AnalyzeRequest, AnalyzeResponse,
    OptimizeRequest, OptimizeResponse,
    JobDescriptionRequest, KeywordsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_analyzer(request: Request) -> ATSAnalyzer:
    """Analyzer built at startup from settings"""
    return request.app.state.analyzer


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(body: AnalyzeRequest, analyzer: ATSAnalyzer = Depends(get_analyzer)):
    """Extract keywords from the job description and score the resume"""
    keywords, score = analyzer.analyze(body.job_description, body.resume.to_resume())

    logger.info(
        f"Analyze: {len(keywords)} keywords, overall {score.overall_score} "
        f"(kw {score.keyword_match_score}, fmt {score.format_score}, "
        f"sections {score.section_completeness_score})"
    )

    return AnalyzeResponse(
        keywords=[k.to_dict() for k in keywords],
        analysis=score.to_dict()
    )


@router.post("/optimize", response_model=OptimizeResponse)
def optimize(body: OptimizeRequest, analyzer: ATSAnalyzer = Depends(get_analyzer)):
    """
    Score the current resume and list what to add

    The resume is returned unchanged; without one, an empty resume is scored
    so every keyword is reported as missing.
    """
    if body.current_resume is not None:
        resume = body.current_resume.to_resume()
    else:
        resume = normalize_resume({})

    keywords, score = analyzer.analyze(body.job_description, resume)
    suggestions = templated_suggestions([k.keyword for k in keywords if not k.matched])

    return OptimizeResponse(
        resume=resume.to_dict(),
        analysis=score.to_dict(),
        suggestions=suggestions,
        keywords=[k.to_dict() for k in keywords]
    )


@router.post("/keywords", response_model=KeywordsResponse)
def extract_keywords(body: JobDescriptionRequest, analyzer: ATSAnalyzer = Depends(get_analyzer)):
    """Extract keywords from a job description without scoring"""
    keywords = analyzer.extract_keywords(body.description)
    return KeywordsResponse(keywords=[k.to_dict() for k in keywords])
