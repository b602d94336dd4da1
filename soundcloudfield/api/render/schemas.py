from typing import List, Optional

from pydantic import BaseModel, Field

from soundcloudfield.core import ClientEmbedSettings, PlayerSettings


class RenderRequest(BaseModel):
    urls: List[str] = Field(min_length=1)
    settings: Optional[PlayerSettings] = None


class RenderedElementOut(BaseModel):
    markup: str
    available: bool
    allowed_tags: List[str]


class ServerRenderResponse(BaseModel):
    elements: List[RenderedElementOut]


class ClientRenderResponse(BaseModel):
    elements: List[str]
    payload: List[ClientEmbedSettings]
    libraries: List[str]
