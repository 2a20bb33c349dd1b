"""
S3 object storage helpers used by the file upload endpoints.

Credentials, region and bucket come from ``shared.core.config.settings``;
nothing is embedded here. ``STORAGE_ENDPOINT_URL`` allows S3 compatible
stores (MinIO, R2) and ``STORAGE_PUBLIC_BASE_URL`` overrides the public URL
returned to clients.
"""
import logging
from typing import BinaryIO, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from shared.core.config import settings

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


class StorageNotFoundError(Exception):
    pass


class StorageClient:

    def __init__(self, bucket: Optional[str], region: Optional[str] = None, client=None,
                 public_base_url: Optional[str] = None):
        self.bucket = bucket
        self.region = region
        self.public_base_url = public_base_url
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "s3",
                aws_access_key_id=settings.AWS_ACCESS_KEY,
                aws_secret_access_key=settings.AWS_SECRET_KEY,
                region_name=self.region,
                endpoint_url=settings.STORAGE_ENDPOINT_URL,
                config=Config(signature_version="s3v4"),
            )
        return self._client

    def public_url(self, key: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{key}"
        if self.region:
            return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"
        return f"https://{self.bucket}.s3.amazonaws.com/{key}"

    def upload(self, fileobj: BinaryIO, key: str, content_type: str, metadata: Optional[dict] = None) -> dict:
        extra = {"ContentType": content_type}
        if metadata:
            extra["Metadata"] = {k: str(v) for k, v in metadata.items()}
        self.client.upload_fileobj(fileobj, self.bucket, key, ExtraArgs=extra)
        logger.info("Uploaded object %s to bucket %s", key, self.bucket)
        return {"bucket": self.bucket, "key": key, "url": self.public_url(key)}

    def head(self, key: str) -> dict:
        try:
            return self.client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in NOT_FOUND_CODES:
                raise StorageNotFoundError(key) from e
            raise

    def delete(self, key: str) -> None:
        # S3 delete is idempotent, so check existence first to report 404s
        self.head(key)
        self.client.delete_object(Bucket=self.bucket, Key=key)
        logger.info("Deleted object %s from bucket %s", key, self.bucket)

    def presigned_put_url(self, key: str, content_type: str, expires_in: int = 3600) -> str:
        return self.client.generate_presigned_url(
            "put_object",
            Params={"Bucket": self.bucket, "Key": key, "ContentType": content_type},
            ExpiresIn=expires_in,
        )


def get_storage_client() -> StorageClient:
    return StorageClient(
        bucket=settings.BUCKET_NAME,
        region=settings.AWS_REGION,
        public_base_url=settings.STORAGE_PUBLIC_BASE_URL,
    )
