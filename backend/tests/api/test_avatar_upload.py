"""Avatar Upload — single image field, type and size restricted.

Invariants:
    - Accepted image stored under upload_dir and referenced from users.avatar
    - Wrong type or oversized file → 400, nothing stored
"""

import os

import pytest

from wallet_api.config import Settings, get_settings
from wallet_api.main import app


@pytest.fixture
def upload_settings(tmp_path):
    settings = Settings(upload_dir=str(tmp_path / "uploads"), upload_max_bytes=64)
    app.dependency_overrides[get_settings] = lambda: settings
    return settings


async def test_upload_png_sets_avatar(client, make_user, auth_headers, upload_settings):
    user = await make_user()

    res = await client.post(
        f"/users/{user.id}/avatar",
        files={"image": ("me.png", b"\x89PNG fake", "image/png")},
        headers=auth_headers(user),
    )

    assert res.status_code == 200
    avatar = res.json()["body"]["avatar"]
    assert avatar.endswith(".png")
    assert os.path.dirname(avatar) == upload_settings.upload_dir
    with open(avatar, "rb") as fh:
        assert fh.read() == b"\x89PNG fake"


async def test_upload_rejects_unsupported_type(client, make_user, auth_headers, upload_settings):
    user = await make_user()

    res = await client.post(
        f"/users/{user.id}/avatar",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=auth_headers(user),
    )

    assert res.status_code == 400
    assert res.json()["code"] == "UPLOAD_REJECTED"
    assert not os.path.exists(upload_settings.upload_dir)


async def test_upload_rejects_oversized_file(client, make_user, auth_headers, upload_settings):
    user = await make_user()

    res = await client.post(
        f"/users/{user.id}/avatar",
        files={"image": ("big.webp", b"x" * 65, "image/webp")},
        headers=auth_headers(user),
    )

    assert res.status_code == 400


async def test_upload_for_foreign_user_returns_403(client, make_user, auth_headers, upload_settings):
    owner = await make_user()
    other = await make_user()

    res = await client.post(
        f"/users/{owner.id}/avatar",
        files={"image": ("me.png", b"png", "image/png")},
        headers=auth_headers(other),
    )

    assert res.status_code == 403


async def test_upload_without_image_field_returns_400(client, make_user, auth_headers, upload_settings):
    user = await make_user()

    res = await client.post(
        f"/users/{user.id}/avatar",
        files={"picture": ("me.png", b"png", "image/png")},
        headers=auth_headers(user),
    )

    assert res.status_code == 400
