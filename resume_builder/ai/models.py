# resume_builder/ai/models.py
from typing import Annotated, List

from pydantic import BaseModel, Field, StringConstraints

from resume_builder.ats.models import KeywordCategory, Importance

KeywordText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SuggestionsResponse(BaseModel):
    """Expected shape of an LLM suggestion answer"""
    suggestions: List[str] = Field(min_length=1)


class KeywordItem(BaseModel):
    keyword: KeywordText
    category: KeywordCategory
    importance: Importance


class KeywordsResponse(BaseModel):
    """Expected shape of an LLM keyword extraction answer"""
    keywords: List[KeywordItem]
