from __future__ import annotations

import base64
from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

from shared.utils import storage_client
from shared.utils.storage_client import StorageClient

BASE = "/api/file-upload"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"0" * 32


class FakeS3:
    def __init__(self) -> None:
        self.objects: dict[str, dict] = {}

    def upload_fileobj(self, fileobj, bucket, key, ExtraArgs=None):
        body = fileobj.read()
        self.objects[key] = {
            "ContentLength": len(body),
            "ContentType": (ExtraArgs or {}).get("ContentType"),
            "Metadata": (ExtraArgs or {}).get("Metadata", {}),
            "LastModified": datetime(2026, 1, 1, tzinfo=timezone.utc),
        }

    def head_object(self, Bucket, Key):
        if Key not in self.objects:
            raise ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, "HeadObject")
        return self.objects[Key]

    def delete_object(self, Bucket, Key):
        self.objects.pop(Key, None)

    def generate_presigned_url(self, operation, Params=None, ExpiresIn=3600):
        return f"https://signed.example.com/{Params['Key']}?expires={ExpiresIn}"


@pytest.fixture
def s3(monkeypatch) -> FakeS3:
    fake = FakeS3()
    monkeypatch.setattr(
        storage_client, "get_storage_client",
        lambda: StorageClient("test-bucket", region="us-east-1", client=fake),
    )
    return fake


def test_upload_single_file(client, auth_headers, s3) -> None:
    response = client.post(f"{BASE}/upload-single",
                           files={"file": ("invite.png", PNG_BYTES, "image/png")},
                           headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["folder"] == "images"
    assert data["file_key"].startswith("images/invite-")
    assert data["file_url"] == f"https://test-bucket.s3.us-east-1.amazonaws.com/{data['file_key']}"
    assert data["file_size"] == len(PNG_BYTES)
    assert data["uploaded_by"] == 1
    assert data["file_key"] in s3.objects


def test_disallowed_type_is_rejected(client, auth_headers, s3) -> None:
    response = client.post(f"{BASE}/upload-single",
                           files={"file": ("tool.exe", b"MZ", "application/x-msdownload")},
                           headers=auth_headers)

    assert response.status_code == 400
    assert s3.objects == {}


def test_oversize_file_is_rejected(client, auth_headers, s3) -> None:
    big = b"0" * (10 * 1024 * 1024 + 1)

    response = client.post(f"{BASE}/upload-single",
                           files={"file": ("big.pdf", big, "application/pdf")},
                           headers=auth_headers)

    assert response.status_code == 400
    assert s3.objects == {}


def test_upload_multiple_files(client, auth_headers, s3) -> None:
    files = [
        ("files", ("a.png", PNG_BYTES, "image/png")),
        ("files", ("b.pdf", b"%PDF-1.4", "application/pdf")),
    ]

    response = client.post(f"{BASE}/upload-multiple", files=files, headers=auth_headers)

    data = response.json()["data"]
    assert data["count"] == 2
    assert sorted(f["folder"] for f in data["files"]) == ["documents", "images"]


def test_more_than_five_files_is_rejected(client, auth_headers, s3) -> None:
    files = [("files", (f"{n}.png", PNG_BYTES, "image/png")) for n in range(6)]

    response = client.post(f"{BASE}/upload-multiple", files=files, headers=auth_headers)

    assert response.status_code == 400
    assert s3.objects == {}


def test_upload_base64_accepts_data_uri(client, auth_headers, s3) -> None:
    encoded = base64.b64encode(PNG_BYTES).decode()

    response = client.post(
        f"{BASE}/upload-base64",
        json={"file_name": "photo.png", "file_type": "image/png",
              "file_data": f"data:image/png;base64,{encoded}"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["file_size"] == len(PNG_BYTES)


def test_upload_base64_rejects_garbage(client, auth_headers, s3) -> None:
    response = client.post(
        f"{BASE}/upload-base64",
        json={"file_name": "photo.png", "file_type": "image/png", "file_data": "***"},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_presigned_url(client, auth_headers, s3) -> None:
    response = client.post(f"{BASE}/presigned-url",
                           json={"file_name": "clip.mp4", "file_type": "video/mp4"},
                           headers=auth_headers)

    data = response.json()["data"]
    assert data["file_key"].startswith("videos/clip-")
    assert data["expires_in"] == 3600
    assert data["upload_url"].startswith("https://signed.example.com/videos/")


def test_info_and_delete_round_trip(client, auth_headers, s3) -> None:
    uploaded = client.post(f"{BASE}/upload-single",
                           files={"file": ("doc.pdf", b"%PDF-1.4", "application/pdf")},
                           headers=auth_headers).json()["data"]
    key = uploaded["file_key"]

    info = client.get(f"{BASE}/info/{key}", headers=auth_headers)
    assert info.status_code == 200
    assert info.json()["data"]["file_type"] == "application/pdf"

    deleted = client.delete(f"{BASE}/delete/{key}", headers=auth_headers)
    assert deleted.status_code == 200
    assert key not in s3.objects


def test_missing_file_is_not_found(client, auth_headers, s3) -> None:
    assert client.get(f"{BASE}/info/images/nope.png", headers=auth_headers).status_code == 404
    assert client.delete(f"{BASE}/delete/images/nope.png", headers=auth_headers).status_code == 404
