from fastapi import APIRouter, Depends

from soundcloudfield.core import PlayerSettings, log_step
from soundcloudfield.render import ClientRenderer, ServerRenderer
from soundcloudfield.soundcloud import OEmbedClient

from ..dependencies import get_oembed_client, get_player_settings
from .schemas import (
    ClientRenderResponse,
    RenderedElementOut,
    RenderRequest,
    ServerRenderResponse,
)

router = APIRouter()


@router.post("/server", response_model=ServerRenderResponse)
def render_server(
    body: RenderRequest,
    stored_settings: PlayerSettings = Depends(get_player_settings),
    client: OEmbedClient = Depends(get_oembed_client),
) -> ServerRenderResponse:
    """
    Render each URL as final player markup.

    Items are fetched one after the other; an unavailable item is rendered as
    the "not available" message and does not affect the others. Settings in
    the request body override the stored formatter settings.
    """
    settings = body.settings or stored_settings
    log_step(f"Server render of {len(body.urls)} item(s)...")

    elements = ServerRenderer(client, settings).render(body.urls)
    return ServerRenderResponse(
        elements=[
            RenderedElementOut(
                markup=e.markup,
                available=e.available,
                allowed_tags=list(e.allowed_tags),
            )
            for e in elements
        ]
    )


@router.post("/client", response_model=ClientRenderResponse)
def render_client(
    body: RenderRequest,
    stored_settings: PlayerSettings = Depends(get_player_settings),
) -> ClientRenderResponse:
    """
    Render placeholders plus the per-item payload for the page initializer.
    No request to SoundCloud is made here.
    """
    settings = body.settings or stored_settings
    output = ClientRenderer(settings).render(body.urls)
    return ClientRenderResponse(
        elements=output.elements,
        payload=output.payload,
        libraries=output.libraries,
    )
