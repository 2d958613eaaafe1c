"""
Passphrase generation endpoint
"""

import random
import secrets

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from wordpass.exceptions import InsufficientWordsError, InvalidConfigurationError
from wordpass.middleware.rate_limit import enforce_rate_limit
from wordpass.schemas.passphrase import PassphraseRequest, PassphraseResponse
from wordpass.services.generator import generate_words
from wordpass.wordlist import Dictionary

router = APIRouter()


def get_dictionary(request: Request) -> Dictionary:
    """Dictionary loaded at startup"""
    dictionary = getattr(request.app.state, "dictionary", None)
    if dictionary is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dictionary not loaded",
        )
    return dictionary


@router.post(
    "/passphrase",
    response_model=PassphraseResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def create_passphrase(
    body: PassphraseRequest,
    response: Response,
    request: Request,
    dictionary: Dictionary = Depends(get_dictionary),
):
    """Generate a passphrase from the loaded dictionary"""
    active_settings = request.app.state.settings

    errors = body.limit_errors(active_settings)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=errors,
        )

    count = body.count if body.count is not None else active_settings.DEFAULT_COUNT
    separator = body.separator if body.separator is not None else active_settings.DEFAULT_SEPARATOR

    # Request-scoped randomness, never shared between requests
    if body.seed is not None:
        rng = random.Random(body.seed)
    else:
        rng = secrets.SystemRandom()

    try:
        words, passphrase = generate_words(
            dictionary,
            body.min_length,
            count,
            separator,
            rng,
        )
    except InsufficientWordsError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    except InvalidConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    response.headers["Cache-Control"] = "no-store"
    return PassphraseResponse(
        passphrase=passphrase,
        word_count=len(words),
        length=len(passphrase),
    )
