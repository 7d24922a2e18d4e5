from typing import Annotated

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.engines.enigma.engine import EnigmaEngine


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_engine() -> EnigmaEngine:
    """Get an engine; it holds no rotor state, so one per request is fine."""
    return EnigmaEngine()

EngineDep = Annotated[EnigmaEngine, Depends(get_engine)]
