from fastapi import APIRouter

from app.api.v1.endpoints import decrypt, encrypt, presets

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    presets.router,
    prefix="/presets",
    tags=["Presets"],
)


@api_router.get("/health", tags=["Health"], summary="Liveness check")
async def health() -> dict[str, str]:
    return {"status": "ok"}
