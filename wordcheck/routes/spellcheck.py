"""
Spell-check endpoints: document checks, suggestions, and the added/ignored
word lists.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from wordcheck.routes import get_spellcheck_context
from wordcheck.schemas.spellcheck import (
    CheckRequest,
    CheckResponse,
    SuggestRequest,
    SuggestResponse,
    WordAddedResponse,
    WordListResponse,
    WordRequest,
)
from wordcheck.services.checker import to_diagnostics
from wordcheck.services.context import SpellCheckContext
from wordcheck.utils.logger import get_logger

logger = get_logger("routes.spellcheck")
router = APIRouter()


@router.post(
    "/check",
    response_model=CheckResponse,
    summary="Check document spelling",
    description="Report every misspelled word occurrence with its character offset",
)
async def check_text(
    request: CheckRequest,
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> CheckResponse:
    misspelled = context.check(request.text)

    logger.info(
        "Spell check completed",
        text_length=len(request.text),
        misspelled_count=len(misspelled),
    )

    return CheckResponse(
        misspelled=misspelled,
        diagnostics=to_diagnostics(misspelled),
    )


@router.post(
    "/suggest",
    response_model=SuggestResponse,
    summary="Suggest corrections",
    description="Dictionary words within a small edit distance, closest first",
)
async def suggest_corrections(
    request: SuggestRequest,
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> SuggestResponse:
    return SuggestResponse(
        word=request.word,
        suggestions=context.suggest(request.word),
    )


@router.post(
    "/words",
    response_model=WordAddedResponse,
    status_code=status.HTTP_200_OK,
    summary="Add word to dictionary",
)
async def add_word(
    request: WordRequest,
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> WordAddedResponse:
    return WordAddedResponse(word=request.word, added=context.add_word(request.word))


@router.get(
    "/words/added",
    response_model=WordListResponse,
    summary="List words added this session",
)
async def list_added_words(
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> WordListResponse:
    return WordListResponse(words=context.added_words)


@router.post(
    "/ignored",
    response_model=WordAddedResponse,
    summary="Ignore word",
)
async def ignore_word(
    request: WordRequest,
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> WordAddedResponse:
    return WordAddedResponse(word=request.word, added=context.ignore_word(request.word))


@router.get(
    "/ignored",
    response_model=WordListResponse,
    summary="List ignored words",
)
async def list_ignored_words(
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> WordListResponse:
    return WordListResponse(words=context.ignored_words)


@router.delete(
    "/ignored/{word}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Stop ignoring word",
    responses={404: {"description": "Word is not ignored"}},
)
async def unignore_word(
    word: str,
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> None:
    if not context.remove_ignored_word(word):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Word '{word}' is not ignored"
        )
