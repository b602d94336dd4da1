import json

import pytest
from fastapi.testclient import TestClient

from soundcloudfield.api.dependencies import get_oembed_client, get_player_settings
from soundcloudfield.api.fastapi_app import app
from soundcloudfield.core import PlayerSettings
from soundcloudfield.soundcloud import OEmbedClient

from fakes import FakeResponse, FakeSession

TRACK_URL = "https://soundcloud.com/artist/trackname"
PRIVATE_URL = "https://soundcloud.com/artist/private-track"
PROVIDER_HTML = (
    '<iframe width="100%" height="400" scrolling="no" frameborder="no" '
    'src="https://w.soundcloud.com/player/?url=https%3A%2F%2Fapi.soundcloud.com'
    '%2Ftracks%2F293&amp;visual=true"></iframe>'
)

client = TestClient(app)


@pytest.fixture(autouse=True)
def overrides():
    """
    Replace the stored settings and the outbound HTTP session for every test.
    """
    session = FakeSession(
        default=FakeResponse(200, json.dumps({"html": PROVIDER_HTML})),
        responses={"private-track": FakeResponse(404, "Not Found")},
    )
    app.dependency_overrides[get_player_settings] = lambda: PlayerSettings(height_track=180)
    app.dependency_overrides[get_oembed_client] = lambda: OEmbedClient(
        endpoint="https://soundcloud.com/oembed", session=session
    )
    yield session
    app.dependency_overrides.clear()


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_render_server_uses_stored_settings(overrides) -> None:
    response = client.post("/render/server", json={"urls": [TRACK_URL, PRIVATE_URL]})
    assert response.status_code == 200

    first, second = response.json()["elements"]

    assert first["available"] is True
    assert first["allowed_tags"] == ["iframe"]
    assert 'height="180"' in first["markup"]
    assert "visual=false" in first["markup"]
    assert "color=ff7700" in first["markup"]

    assert second["available"] is False
    assert second["allowed_tags"] == []
    assert "<iframe" not in second["markup"]
    assert PRIVATE_URL in second["markup"]
    assert len(overrides.calls) == 2


def test_render_server_accepts_settings_override() -> None:
    body = {
        "urls": [TRACK_URL],
        "settings": {"soundcloud_player_color": "#336699", "autoplay": True, "width": 75},
    }

    response = client.post("/render/server", json=body)
    assert response.status_code == 200

    markup = response.json()["elements"][0]["markup"]
    assert "color=336699" in markup
    assert "auto_play=true" in markup
    assert 'width="75%"' in markup


def test_render_server_rejects_invalid_settings() -> None:
    body = {"urls": [TRACK_URL], "settings": {"color": "nothex"}}

    response = client.post("/render/server", json=body)

    assert response.status_code == 422


def test_render_server_requires_urls() -> None:
    response = client.post("/render/server", json={"urls": []})

    assert response.status_code == 422


def test_render_client_returns_placeholders_and_payload(overrides) -> None:
    response = client.post("/render/client", json={"urls": [TRACK_URL]})
    assert response.status_code == 200

    data = response.json()
    assert data["libraries"] == [
        "soundcloudfield/soundcloud_sdk",
        "soundcloudfield/soundcloudfield_init",
    ]
    [entry] = data["payload"]
    assert entry["url"] == TRACK_URL
    assert entry["maxheight"] == 180
    assert entry["color"] == "ff7700"
    assert f'id="{entry["id"]}"' in data["elements"][0]
    # Client rendering never calls SoundCloud itself.
    assert overrides.calls == []


def test_settings_endpoints() -> None:
    settings = client.get("/settings").json()
    assert settings["height_track"] == 180
    assert settings["player_type"] == "classic"

    options = client.get("/settings/options").json()
    assert options["visual_height"] == [300, 450, 600]

    assert client.get("/settings/summary").json() == ["Displays the SoundCloud player."]


def test_render_endpoints_survive_malformed_url(overrides) -> None:
    bad_url = "https://[soundcloud.com/a/b"
    body = {"urls": [TRACK_URL, bad_url, TRACK_URL]}

    server = client.post("/render/server", json=body)
    assert server.status_code == 200
    assert [e["available"] for e in server.json()["elements"]] == [True, False, True]

    rendered = client.post("/render/client", json=body)
    assert rendered.status_code == 200
    assert [e["url"] for e in rendered.json()["payload"]] == [TRACK_URL, bad_url, TRACK_URL]
