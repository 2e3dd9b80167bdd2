"""Tests for API endpoints."""

import inspect

import pytest
from fastapi.testclient import TestClient

from bootcheck.api.routers import targets, verdicts
from bootcheck.app import app
from bootcheck.config.constants import Target
from bootcheck.config.settings import get_settings

FULL_BOOT = "Loading kernel... Loading initramfs... Rustica OS Installer... root@host:~$ "


@pytest.fixture
def client(settings):
    """Provide a FastAPI test client bound to temporary directories."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==========================================
#  HEALTH
# ==========================================


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "0.1.0"}


# ==========================================
#  POST /api/verdicts
# ==========================================


def test_classify_text_all_pass(client):
    response = client.post("/api/verdicts", json={"target": "amd64", "transcript": FULL_BOOT})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "passed"
    assert data["passed"] == 5
    assert data["total"] == 5
    assert data["success"] is True
    assert [c["name"] for c in data["checks"]] == [
        "kernel_loaded",
        "initramfs_loaded",
        "installer_started",
        "no_panic",
        "reached_shell",
    ]


def test_classify_text_empty(client):
    response = client.post("/api/verdicts", json={"target": "arm64", "transcript": ""})
    data = response.json()
    assert data["status"] == "failed"
    assert data["passed"] == 1


def test_classify_text_with_ansi_colors(client):
    text = "\x1b[1mLoading kernel\x1b[0m\r\nKERNEL PANIC"
    data = client.post("/api/verdicts", json={"target": "amd64", "transcript": text}).json()
    checks = {c["name"]: c["passed"] for c in data["checks"]}
    assert checks["kernel_loaded"] is True
    assert checks["no_panic"] is False


def test_classify_text_unknown_target(client):
    response = client.post("/api/verdicts", json={"target": "sparc", "transcript": ""})
    assert response.status_code == 422


def test_classify_text_missing_fields(client):
    response = client.post("/api/verdicts", json={"target": "amd64"})
    assert response.status_code == 422


# ==========================================
#  GET /api/verdicts/{target}
# ==========================================


def test_classify_stored_missing_is_indeterminate(client):
    response = client.get("/api/verdicts/riscv64")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "indeterminate"
    assert data["reason"] == "boot log not found"
    assert data["passed"] is None
    assert data["total"] is None
    assert data["checks"] == []


def test_classify_stored_log(client, write_transcript):
    path = write_transcript(Target.ARM64, "kernel panic: out of memory\n" + FULL_BOOT)
    data = client.get("/api/verdicts/arm64").json()
    assert data["status"] == "failed"
    assert data["passed"] == 4
    assert data["transcript_path"] == str(path)


def test_classify_stored_unknown_target(client):
    assert client.get("/api/verdicts/mips").status_code == 422


# ==========================================
#  POST /api/validation
# ==========================================


def test_validation_selected_targets(client, write_transcript):
    write_transcript(Target.AMD64, FULL_BOOT)
    response = client.post(
        "/api/validation",
        json={"targets": ["riscv64", "amd64"], "write_report": False},
    )
    assert response.status_code == 200
    data = response.json()
    assert [o["target"] for o in data["outcomes"]] == ["riscv64", "amd64"]
    assert [o["status"] for o in data["outcomes"]] == ["indeterminate", "passed"]
    assert data["passed"] == 1
    assert data["indeterminate"] == 1
    assert data["all_passed"] is False
    assert data["report_path"] is None


def test_validation_without_body_uses_defaults(client):
    response = client.post("/api/validation")
    assert response.status_code == 200
    data = response.json()
    assert len(data["outcomes"]) == 3
    assert data["indeterminate"] == 3


def test_validation_writes_report(client, settings, write_transcript):
    write_transcript(Target.AMD64, FULL_BOOT)
    data = client.post("/api/validation", json={"targets": ["amd64"], "write_report": True}).json()
    assert data["report_path"].startswith(str(settings.images_dir))
    assert data["all_passed"] is True


# ==========================================
#  /api/targets
# ==========================================


def test_list_targets(client, write_transcript):
    write_transcript(Target.ARM64, FULL_BOOT)
    data = client.get("/api/targets").json()
    assert [t["target"] for t in data] == ["amd64", "arm64", "riscv64"]
    assert [t["transcript_exists"] for t in data] == [False, True, False]


def test_qemu_command_without_image(client):
    response = client.get("/api/targets/amd64/qemu-command")
    assert response.status_code == 404
    assert "No installer image" in response.json()["detail"]


def test_qemu_command(client, settings):
    settings.images_dir.mkdir(parents=True)
    (settings.images_dir / "rustica-installer-arm64-1.img").write_bytes(b"")
    response = client.get("/api/targets/arm64/qemu-command")
    assert response.status_code == 200
    data = response.json()
    assert data["argv"][0] == "qemu-system-aarch64"
    assert data["timeout"] == 60
    assert data["disk_command"][:4] == ["qemu-img", "create", "-f", "raw"]
    assert data["disk_command"][-1] == "4G"


@pytest.mark.parametrize(
    "handler",
    [targets.list_targets, targets.get_qemu_command, verdicts.classify_stored],
)
def test_filesystem_handlers_run_in_threadpool(handler):
    """Handlers that touch the filesystem are sync so they stay off the event loop."""
    assert not inspect.iscoroutinefunction(handler)
