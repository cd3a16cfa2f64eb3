"""Tests for the task move API endpoint."""

import json
from datetime import date, timedelta

import pytest

from forwardtask.api.dependencies import get_data_path
from forwardtask.main import app
from tests.conftest import override_vault_path


@pytest.fixture()
def vault(tmp_path):
    vault = tmp_path / "vault"
    (vault / "Projects").mkdir(parents=True)
    (vault / "Projects" / "Garden.md").write_text(
        "# Garden\n- [ ] Plant tulips\n- [>] Old one\nNot a task\n", encoding="utf-8"
    )
    return vault


@pytest.fixture()
def data_dir(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    app.dependency_overrides[get_data_path] = lambda: data
    yield data
    app.dependency_overrides.pop(get_data_path, None)


def _daily(vault, offset=0):
    return vault / "00_Daily" / f"{(date.today() + timedelta(days=offset)).isoformat()}.md"


class TestMoveTaskAPI:
    def test_moves_task_to_today(self, client, vault, data_dir):
        with override_vault_path(vault):
            resp = client.post("/api/v1/tasks/move", json={"path": "Projects/Garden.md", "line": 1})

        assert resp.status_code == 200
        data = resp.json()
        assert data["moved"] is True
        assert data["reason"] is None
        assert data["message"] == "✓ Task moved to today's Daily Note"
        assert data["destination"] == f"00_Daily/{date.today().isoformat()}.md"
        assert "- [ ] Plant tulips" in _daily(vault).read_text(encoding="utf-8")
        garden = (vault / "Projects" / "Garden.md").read_text(encoding="utf-8")
        assert "- [>] Plant tulips" in garden

    def test_moves_under_configured_header(self, client, vault, data_dir):
        (data_dir / "settings.json").write_text(json.dumps({"section_header": "## Inbox"}))
        with override_vault_path(vault):
            resp = client.post(
                "/api/v1/tasks/move",
                json={"path": "Projects/Garden.md", "line": 1, "days_offset": 1},
            )

        assert resp.json()["moved"] is True
        content = _daily(vault, 1).read_text(encoding="utf-8")
        assert content.endswith("\n## Inbox\n\n- [ ] Plant tulips")

    def test_refused_move_is_not_an_http_error(self, client, vault, data_dir):
        with override_vault_path(vault):
            resp = client.post("/api/v1/tasks/move", json={"path": "Projects/Garden.md", "line": 2})

        assert resp.status_code == 200
        data = resp.json()
        assert data["moved"] is False
        assert data["reason"] == "already_moved"
        assert not (vault / "00_Daily").exists()

    def test_relative_move_from_non_daily_note(self, client, vault, data_dir):
        with override_vault_path(vault):
            resp = client.post(
                "/api/v1/tasks/move",
                json={"path": "Projects/Garden.md", "line": 1, "relative": True},
            )

        assert resp.json()["reason"] == "not_a_daily_note"

    def test_relative_move_from_daily_note(self, client, vault, data_dir):
        yesterday = _daily(vault, -1)
        yesterday.parent.mkdir()
        yesterday.write_text("## Tasks\n- [ ] Carry over\n", encoding="utf-8")
        with override_vault_path(vault):
            resp = client.post(
                "/api/v1/tasks/move",
                json={
                    "path": f"00_Daily/{yesterday.name}",
                    "line": 1,
                    "relative": True,
                },
            )

        data = resp.json()
        assert data["moved"] is True
        assert data["destination"] == f"00_Daily/{_daily(vault).name}"

    def test_returns_503_when_vault_none(self, client, data_dir):
        with override_vault_path(None):
            resp = client.post("/api/v1/tasks/move", json={"path": "a.md", "line": 0})
            assert resp.status_code == 503
            assert "Vault path" in resp.json()["detail"]

    def test_returns_503_when_vault_missing(self, client, tmp_path, data_dir):
        with override_vault_path(tmp_path / "nonexistent"):
            resp = client.post("/api/v1/tasks/move", json={"path": "a.md", "line": 0})
            assert resp.status_code == 503

    def test_rejects_path_outside_vault(self, client, vault, data_dir):
        with override_vault_path(vault):
            resp = client.post("/api/v1/tasks/move", json={"path": "../secret.md", "line": 0})
        assert resp.status_code == 400

    def test_missing_note_returns_404(self, client, vault, data_dir):
        with override_vault_path(vault):
            resp = client.post("/api/v1/tasks/move", json={"path": "Nope.md", "line": 0})
        assert resp.status_code == 404

    def test_line_out_of_range_returns_404(self, client, vault, data_dir):
        with override_vault_path(vault):
            resp = client.post(
                "/api/v1/tasks/move", json={"path": "Projects/Garden.md", "line": 99}
            )
        assert resp.status_code == 404

    def test_negative_line_rejected(self, client, vault, data_dir):
        with override_vault_path(vault):
            resp = client.post(
                "/api/v1/tasks/move", json={"path": "Projects/Garden.md", "line": -1}
            )
        assert resp.status_code == 422

    def test_non_utf8_note_returns_422(self, client, vault, data_dir):
        (vault / "Latin1.md").write_bytes(b"- [ ] caf\xe9\n")
        with override_vault_path(vault):
            resp = client.post("/api/v1/tasks/move", json={"path": "Latin1.md", "line": 0})
        assert resp.status_code == 422
        assert "UTF-8" in resp.json()["detail"]
        assert not (vault / "00_Daily").exists()
