from __future__ import annotations

import pytest
from botocore.exceptions import ClientError

from shared.utils.storage_client import StorageClient, StorageNotFoundError


def client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "HeadObject")


class FakeS3:
    def __init__(self, head_error: ClientError | None = None) -> None:
        self.head_error = head_error
        self.deleted: list[str] = []

    def head_object(self, Bucket, Key):
        if self.head_error is not None:
            raise self.head_error
        return {"ContentLength": 4, "ContentType": "image/png"}

    def delete_object(self, Bucket, Key):
        self.deleted.append(Key)


def test_public_url_uses_regional_bucket_host() -> None:
    storage = StorageClient("media", region="eu-west-1", client=FakeS3())

    assert storage.public_url("images/a.png") == "https://media.s3.eu-west-1.amazonaws.com/images/a.png"


def test_public_base_url_overrides_bucket_host() -> None:
    storage = StorageClient("media", region="eu-west-1", client=FakeS3(),
                            public_base_url="https://cdn.example.com/")

    assert storage.public_url("images/a.png") == "https://cdn.example.com/images/a.png"


@pytest.mark.parametrize("code", ["404", "NoSuchKey", "NotFound"])
def test_missing_object_raises_not_found(code: str) -> None:
    storage = StorageClient("media", client=FakeS3(head_error=client_error(code)))

    with pytest.raises(StorageNotFoundError):
        storage.head("images/missing.png")


def test_other_storage_errors_propagate() -> None:
    storage = StorageClient("media", client=FakeS3(head_error=client_error("AccessDenied")))

    with pytest.raises(ClientError):
        storage.head("images/a.png")


def test_delete_of_missing_object_does_not_call_delete() -> None:
    s3 = FakeS3(head_error=client_error("404"))
    storage = StorageClient("media", client=s3)

    with pytest.raises(StorageNotFoundError):
        storage.delete("images/missing.png")
    assert s3.deleted == []
