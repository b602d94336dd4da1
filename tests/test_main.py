import json

import main
from soundcloudfield.soundcloud import OEmbedClient

from fakes import FakeResponse, FakeSession

TRACK_URL = "https://soundcloud.com/artist/trackname"


def _patch_client(monkeypatch, response: FakeResponse) -> None:
    session = FakeSession(response)
    monkeypatch.setattr(
        "main.OEmbedClient",
        lambda: OEmbedClient(endpoint="https://soundcloud.com/oembed", session=session),
        raising=True,
    )


def test_main_prints_rewritten_markup(monkeypatch, capsys, tmp_path) -> None:
    html = '<iframe src="https://w.soundcloud.com/player/?url=x" width="100%" height="400"></iframe>'
    _patch_client(monkeypatch, FakeResponse(200, json.dumps({"html": html})))

    status = main.main([TRACK_URL, "--settings", str(tmp_path / "none.json")])

    out = capsys.readouterr().out
    assert status == 0
    assert 'height="166"' in out
    assert "color=ff7700" in out


def test_main_reports_unavailable_items(monkeypatch, capsys, tmp_path) -> None:
    _patch_client(monkeypatch, FakeResponse(404, "Not Found"))

    status = main.main([TRACK_URL, "--settings", str(tmp_path / "none.json")])

    assert status == 1
    assert "is not available" in capsys.readouterr().out


def test_main_client_mode_prints_payload(capsys, tmp_path) -> None:
    status = main.main([TRACK_URL, "--client", "--settings", str(tmp_path / "none.json")])

    out = capsys.readouterr().out
    assert status == 0
    assert "soundcloudfield-js-embed-wrapper" in out
    assert '"maxheight":166' in out
