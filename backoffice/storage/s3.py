import logging
from urllib.parse import urlparse

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from backoffice.config import Settings
from backoffice.core.exceptions import StorageException
from backoffice.storage.base import StoredImage, build_keys
from backoffice.storage.images import transcode

logger = logging.getLogger(__name__)


class S3ImageStorage:
    """
    Image store backed by S3 (or LocalStack when AWS_S3_ENDPOINT is set).

    Objects are addressed by public URLs of the form
    "<endpoint>/<bucket>/<key>" against a custom endpoint, otherwise
    "https://<bucket>.s3.<region>.amazonaws.com/<key>".
    """

    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        self.bucket = settings.AWS_S3_BUCKET
        self._client = client or boto3.client(
            "s3",
            endpoint_url=settings.AWS_S3_ENDPOINT,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_REGION,
            config=Config(
                signature_version="s3v4",
                s3={"addressing_style": "path"} if settings.AWS_S3_ENDPOINT else {},
            ),
        )

    def public_url(self, key: str) -> str:
        if self.settings.AWS_S3_ENDPOINT:
            return f"{self.settings.AWS_S3_ENDPOINT.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self.settings.AWS_REGION}.amazonaws.com/{key}"

    def key_from_url(self, url: str) -> str | None:
        """Recover the object key from a URL produced by public_url()"""
        path = urlparse(url).path.lstrip("/")
        if self.settings.AWS_S3_ENDPOINT:
            prefix = f"{self.bucket}/"
            if not path.startswith(prefix):
                return None
            path = path[len(prefix):]
        return path or None

    def _put(self, key: str, body: bytes) -> None:
        try:
            self._client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType="image/jpeg",
            )
        except (ClientError, BotoCoreError) as e:
            logger.exception("S3 upload failed for key %s", key)
            raise StorageException(f"Failed to upload image: {e}") from e

    def store(self, data: bytes, folder: str) -> StoredImage:
        full, thumbnail = transcode(
            data, self.settings.IMAGE_MAX_SIZE, self.settings.THUMBNAIL_MAX_SIZE
        )
        full_key, thumbnail_key = build_keys(folder)

        self._put(full_key, full)
        self._put(thumbnail_key, thumbnail)

        logger.info("Stored image %s in bucket %s", full_key, self.bucket)
        return StoredImage(
            full_url=self.public_url(full_key),
            thumbnail_url=self.public_url(thumbnail_key),
        )

    def delete(self, url: str) -> None:
        key = self.key_from_url(url)
        if key is None:
            logger.warning("Cannot extract S3 key from URL %s; skipping delete", url)
            return

        try:
            self._client.delete_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.exception("S3 delete failed for key %s", key)
            raise StorageException(f"Failed to delete image: {e}") from e

        logger.info("Deleted image %s from bucket %s", key, self.bucket)
