from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import ConfigInvalidError, PresetNotFoundError
from app.dependencies import EngineDep, SettingsDep
from app.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from app.services.preprocessing.normalizer import TextNormalizer

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or machine configuration"},
        404: {"model": ErrorResponse, "description": "Rotor or reflector preset not found"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext on an Enigma machine set up exactly as it was for encryption.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> DecryptResponse:
    """Decrypt ciphertext with a known machine configuration."""
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    try:
        normalizer = TextNormalizer()
        normalized = normalizer.normalize(request.ciphertext, request.normalize_mode)

        result = engine.decrypt_with_key(normalized, request.machine)

        return DecryptResponse(
            plaintext=result.plaintext,
            final_positions=result.final_positions,
            letters_processed=result.letters_processed,
            explanation=result.explanation,
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
