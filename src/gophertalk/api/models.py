"""Pydantic models for API."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class WordTranslationRequest(BaseModel):
    """Request body for POST /word."""

    word: str = Field("", alias="english-word", description="English word")


class WordTranslationResponse(BaseModel):
    """Response for POST /word."""

    model_config = ConfigDict(populate_by_name=True)

    gopher_word: str = Field(..., alias="gopher-word", description="Gopher word")


class SentenceTranslationRequest(BaseModel):
    """Request body for POST /sentence."""

    sentence: str = Field(
        "",
        alias="english-sentence",
        description="English sentence ending with a punctuation mark",
    )


class SentenceTranslationResponse(BaseModel):
    """Response for POST /sentence."""

    model_config = ConfigDict(populate_by_name=True)

    gopher_sentence: str = Field(
        ..., alias="gopher-sentence", description="Gopher sentence"
    )


class HistoryModel(BaseModel):
    """Response for GET /history (documentation only)."""

    history: List[Dict[str, str]] = Field(
        ...,
        description="Word entries then sentence entries, each ordered by key",
    )
