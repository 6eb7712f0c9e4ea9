# text_analyzer/schemas.py
# Pydantic models for the HTTP layer. Field names follow the camelCase wire format.

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from text_analyzer.services.analyzer import AnalysisResult


class AnalyzeRequest(BaseModel):
    text: str
    delimiter: Optional[str] = Field(
        default="",
        description="Literal sentence delimiter. Empty means split on runs of '.', '!' and '?'.",
    )


class WordCount(BaseModel):
    word: str
    count: int


class AnalyzeResponse(BaseModel):
    charCount: int
    wordCount: int
    sentenceCount: int
    frequentWords: List[Union[WordCount, Dict[str, int]]]
    readingTime: str


class ErrorResponse(BaseModel):
    error: str


def to_response(result: AnalysisResult, shape: str = "pairs") -> AnalyzeResponse:
    """
    Serialize an AnalysisResult. "pairs" gives [{"word": w, "count": n}],
    "mapping" gives [{w: n}]; both keep the ranking order.
    """
    if shape == "mapping":
        frequent = [{item.word: item.count} for item in result.frequent_words]
    else:
        frequent = [WordCount(word=item.word, count=item.count) for item in result.frequent_words]

    return AnalyzeResponse(
        charCount=result.char_count,
        wordCount=result.word_count,
        sentenceCount=result.sentence_count,
        frequentWords=frequent,
        readingTime=result.reading_time,
    )
