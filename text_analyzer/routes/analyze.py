import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from text_analyzer.config import Settings
from text_analyzer.messages import error_message
from text_analyzer.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse, to_response
from text_analyzer.services.analyzer import TextAnalyzer

logger = logging.getLogger(__name__)
router = APIRouter()


def get_analyzer(request: Request) -> TextAnalyzer:
    return request.app.state.analyzer


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
def analyze(
    req: AnalyzeRequest,
    analyzer: TextAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_app_settings),
):
    if not req.text.strip():
        logger.warning("Rejected analyze request: empty text")
        raise HTTPException(status_code=400, detail=error_message("empty_text", settings.locale))
    if len(req.text) > settings.max_text_length:
        logger.warning("Rejected analyze request: %d chars exceeds limit of %d",
                       len(req.text), settings.max_text_length)
        raise HTTPException(
            status_code=413,
            detail=error_message("text_too_long", settings.locale, limit=settings.max_text_length),
        )

    result = analyzer.analyze(req.text, req.delimiter)
    logger.info(
        "Analyzed text: chars=%d words=%d sentences=%d custom_delimiter=%s",
        result.char_count, result.word_count, result.sentence_count, bool(req.delimiter),
    )
    return to_response(result, settings.frequent_words_shape)
