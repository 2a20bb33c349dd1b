from __future__ import annotations

import re

import pytest
from fastapi import HTTPException

from event_service.app.crud.files.file_upload_crud import build_file_key, folder_for, validate_file


@pytest.mark.parametrize(
    "content_type,folder",
    [
        ("image/png", "images"),
        ("video/mp4", "videos"),
        ("audio/mp3", "audio"),
        ("application/pdf", "documents"),
        ("application/msword", "general"),
    ],
)
def test_folder_follows_content_type(content_type: str, folder: str) -> None:
    assert folder_for(content_type) == folder


def test_key_has_folder_stem_timestamp_random_and_extension() -> None:
    key = build_file_key("Party Invite.PNG", "image/png")

    assert re.fullmatch(r"images/Party-Invite-\d{13}-[0-9a-f]{8}\.png", key)


def test_key_strips_directories_and_unsafe_characters() -> None:
    key = build_file_key("../../etc/pass wd?.pdf", "application/pdf")

    assert key.startswith("documents/pass-wd-")
    assert key.endswith(".pdf")
    assert ".." not in key


def test_keys_are_unique() -> None:
    assert build_file_key("a.png", "image/png") != build_file_key("a.png", "image/png")


def test_disallowed_type_is_rejected() -> None:
    with pytest.raises(HTTPException) as exc:
        validate_file("application/x-msdownload", 10)

    assert exc.value.status_code == 400


def test_oversize_file_is_rejected() -> None:
    with pytest.raises(HTTPException) as exc:
        validate_file("image/png", 10 * 1024 * 1024 + 1)

    assert exc.value.status_code == 400
    assert "10 MB" in exc.value.detail["message"]


def test_file_at_the_limit_is_accepted() -> None:
    validate_file("image/png", 10 * 1024 * 1024)
