from fastapi import FastAPI

from soundcloudfield.api.health import router as health_router
from soundcloudfield.api.render.routes import router as render_router
from soundcloudfield.api.settings.routes import router as settings_router
from soundcloudfield.core import configure_logging

configure_logging()

app = FastAPI(
    title="SoundCloud Field API",
    version="0.1.0",
    description="Renders SoundCloud players for content fields.",
)

app.include_router(health_router, tags=["health"])
app.include_router(settings_router, prefix="/settings", tags=["settings"])
app.include_router(render_router, prefix="/render", tags=["render"])
