from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from soundcloudfield.core import PlayerSettings
from soundcloudfield.data import settings_options

from ..dependencies import get_player_settings

router = APIRouter()


@router.get("", response_model=PlayerSettings, response_model_by_alias=False)
def get_settings(
    settings: PlayerSettings = Depends(get_player_settings),
) -> PlayerSettings:
    return settings


@router.get("/options")
def get_settings_options() -> Dict[str, Any]:
    return settings_options()


@router.get("/summary")
def get_settings_summary(
    settings: PlayerSettings = Depends(get_player_settings),
) -> List[str]:
    return settings.summary()
