# resume_builder/web/app.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_builder.config import ScoringConfig, get_config
from resume_builder.ats.analyzer import ATSAnalyzer
from resume_builder.ats.scorer import ATSScorer
from resume_builder.ai.ollama_client import OllamaClient
from resume_builder.ai.suggestion_enricher import OllamaSuggestionProvider
from resume_builder.ai.keyword_extractor import OllamaKeywordExtractor
from resume_builder.utils import setup_logging
from resume_builder.web.config import Settings, get_settings
from resume_builder.web.api import analysis

logger = logging.getLogger(__name__)


def build_analyzer(settings: Settings) -> ATSAnalyzer:
    """Wire scorer, keyword strategy and optional AI enrichment from settings"""
    if settings.scoring_config_path:
        config = get_config(settings.scoring_config_path)
    else:
        config = ScoringConfig.preset(settings.scoring_preset)

    suggestion_provider = None
    keyword_extractor = None

    if settings.ai_suggestions_enabled or settings.ai_keywords_enabled:
        client = OllamaClient(
            base_url=settings.ollama_host,
            model=settings.ollama_model,
            timeout=settings.ollama_timeout
        )
        if settings.ai_suggestions_enabled:
            suggestion_provider = OllamaSuggestionProvider(client)
        if settings.ai_keywords_enabled:
            keyword_extractor = OllamaKeywordExtractor(client)

        logger.info(f"AI enrichment enabled via {settings.ollama_host} ({settings.ollama_model})")

    return ATSAnalyzer(
        keyword_extractor=keyword_extractor,
        scorer=ATSScorer(config=config, suggestion_provider=suggestion_provider)
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings
    app.state.analyzer = build_analyzer(settings)

    app.include_router(analysis.router, prefix="/api", tags=["analysis"])

    # ============= Health Check =============

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.version
        }

    # ============= Error Handlers =============

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Reject malformed bodies with 400, listing the problems"""
        return JSONResponse(
            status_code=400,
            content={
                "message": "Invalid request data",
                "errors": jsonable_encoder(exc.errors())
            }
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        """Report unexpected failures as JSON"""
        logger.exception(f"Unhandled error on {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"message": str(exc) or "Internal server error"}
        )

    return app


app = create_app()


def main():
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "resume_builder.web.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    main()
