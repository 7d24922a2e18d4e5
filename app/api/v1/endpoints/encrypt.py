from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import ConfigInvalidError, PresetNotFoundError
from app.dependencies import EngineDep, SettingsDep
from app.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from app.services.preprocessing.normalizer import TextNormalizer

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or machine configuration"},
        404: {"model": ErrorResponse, "description": "Rotor or reflector preset not found"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext on an Enigma machine. A random machine is set up when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with the given machine configuration.

    The returned configuration is the key: sending the ciphertext to
    /decrypt with it recovers the (normalized) plaintext.
    """
    # Validate plaintext length
    if len(request.plaintext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_text_length}",
        )

    # Generate key if not provided
    key = request.machine
    if key is None:
        key = engine.generate_random_key()

    try:
        normalizer = TextNormalizer()
        normalized = normalizer.normalize(request.plaintext, request.normalize_mode)

        result = engine.encrypt_with_key(normalized, key)

        return EncryptResponse(
            ciphertext=result.ciphertext,
            machine=key,
            final_positions=result.final_positions,
            letters_processed=result.letters_processed,
        )

    except PresetNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except ConfigInvalidError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
