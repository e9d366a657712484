"""
HTTP routes exposing the spell-check operations.
"""
from fastapi import HTTPException, Request, status

from wordcheck.services.context import SpellCheckContext


def get_spellcheck_context(request: Request) -> SpellCheckContext:
    """
    Return the context created at startup.

    Raises:
        HTTPException: 503 if the dictionary has not been loaded
    """
    context = getattr(request.app.state, "spellcheck", None)
    if context is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Spell-check dictionary is not loaded"
        )
    return context
