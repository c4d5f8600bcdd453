"""API route definitions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from gophertalk.api.models import (
    HistoryModel,
    SentenceTranslationRequest,
    SentenceTranslationResponse,
    WordTranslationRequest,
    WordTranslationResponse,
)
from gophertalk.history import TranslationHistory
from gophertalk.translation import (
    DEFAULT_CONTEXT,
    TranslationError,
    translate_sentence,
    translate_word,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_history(request: Request) -> TranslationHistory:
    """History owned by the running application."""
    return request.app.state.history


@router.post("/word", response_model=WordTranslationResponse)
async def word_translation(
    body: WordTranslationRequest,
    history: TranslationHistory = Depends(get_history),
):
    """Translate a single English word."""
    if body.word == "":
        raise HTTPException(
            status_code=400,
            detail="Request body must have 'english-word' field in it",
        )

    try:
        gopher_word = translate_word(DEFAULT_CONTEXT, body.word, history=history)
    except TranslationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return WordTranslationResponse(gopher_word=gopher_word)


@router.post("/sentence", response_model=SentenceTranslationResponse)
async def sentence_translation(
    body: SentenceTranslationRequest,
    history: TranslationHistory = Depends(get_history),
):
    """Translate an English sentence ending with a punctuation mark."""
    if body.sentence == "":
        raise HTTPException(
            status_code=400,
            detail="Request body must have 'english-sentence' field in it",
        )

    try:
        gopher_sentence = translate_sentence(
            DEFAULT_CONTEXT, body.sentence, history=history
        )
    except TranslationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SentenceTranslationResponse(gopher_sentence=gopher_sentence)


@router.get("/history", response_model=HistoryModel)
async def history_export(history: TranslationHistory = Depends(get_history)):
    """All translations so far: words first, then sentences."""
    return Response(
        content=history.snapshot().to_json(),
        media_type="application/json",
    )
