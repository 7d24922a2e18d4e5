from fastapi import APIRouter

from app.models.schemas import PresetsResponse, ReflectorPresetInfo, RotorPresetInfo
from app.services.engines.registry import PresetRegistry

router = APIRouter()


@router.get(
    "",
    response_model=PresetsResponse,
    summary="List presets",
    description="List the catalogued rotor and reflector wirings.",
)
async def list_presets() -> PresetsResponse:
    registry = PresetRegistry()
    return PresetsResponse(
        rotors=[
            RotorPresetInfo(name=rotor.name, wiring=rotor.wiring, notch=rotor.notch)
            for rotor in registry.list_rotors()
        ],
        reflectors=[
            ReflectorPresetInfo(name=reflector.name, wiring=reflector.wiring)
            for reflector in registry.list_reflectors()
        ],
    )
