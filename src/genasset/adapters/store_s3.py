"""S3 asset store adapter."""

from typing import Any

import boto3
from botocore.exceptions import ClientError

from ..core.errors import NotFoundError
from ..core.models import AssetTuple
from ..ports.hash import HashPort
from ..ports.store import AssetStorePort
from .store_paths import asset_path, normalize_filename

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


class S3AssetStore(AssetStorePort):
    """Content-addressed store backed by an S3 bucket."""

    def __init__(
        self,
        bucket: str,
        hasher: HashPort,
        prefix: str = "",
        base_url: str | None = None,
        url_expires_in: int = 3600,
        client: Any = None,
        endpoint_url: str | None = None,
        region: str | None = None,
        profile: str | None = None,
    ):
        """Initialize with bucket and optional boto3 client.

        Args:
            base_url: Public URL prefix; when None, presigned URLs are returned.
            url_expires_in: Lifetime of presigned URLs in seconds.
        """
        self.bucket = bucket
        self.hasher = hasher
        self.prefix = prefix.strip("/")
        self.base_url = base_url.rstrip("/") if base_url else None
        self.url_expires_in = url_expires_in
        if client is None:
            session = boto3.Session(profile_name=profile, region_name=region)
            client = session.client("s3", endpoint_url=endpoint_url)
        self.client = client

    def _object_key(self, filename: str, hash: str, variant: str) -> str:
        key = asset_path(filename, hash, variant)
        return f"{self.prefix}/{key}" if self.prefix else key

    def set_from_string(self, content: bytes, filename: str) -> AssetTuple | None:
        result = AssetTuple(
            filename=normalize_filename(filename),
            hash=self.hasher.sha1(content),
        )
        self.client.put_object(
            Bucket=self.bucket,
            Key=self._object_key(result.filename, result.hash, result.variant),
            Body=content,
            Metadata={"ga-filename": result.filename, "ga-sha1": result.hash},
        )
        return result

    def exists(self, filename: str, hash: str, variant: str = "") -> bool:
        try:
            self.client.head_object(
                Bucket=self.bucket, Key=self._object_key(filename, hash, variant)
            )
        except ClientError as e:
            if _error_code(e) in _MISSING_CODES:
                return False
            raise
        return True

    def get_as_url(self, filename: str, hash: str, variant: str = "") -> str:
        key = self._object_key(filename, hash, variant)
        if self.base_url:
            return f"{self.base_url}/{key}"
        return self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=self.url_expires_in,
        )

    def get_as_string(self, filename: str, hash: str, variant: str = "") -> bytes:
        try:
            response = self.client.get_object(
                Bucket=self.bucket, Key=self._object_key(filename, hash, variant)
            )
        except ClientError as e:
            if _error_code(e) in _MISSING_CODES:
                raise NotFoundError(f"Asset not found: {filename} ({hash})") from e
            raise
        return response["Body"].read()

    def delete(self, filename: str, hash: str, variant: str = "") -> None:
        self.client.delete_object(
            Bucket=self.bucket, Key=self._object_key(filename, hash, variant)
        )


def _error_code(error: ClientError) -> str:
    response: Any = error.response
    return str(response.get("Error", {}).get("Code", ""))
