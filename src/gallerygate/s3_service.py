"""
Asynchronous S3 Client Service

This module provides an async-first S3/MinIO client that uses aioboto3 for
non-blocking S3 operations. The client is designed to be used as an application
singleton via dependency injection and implements ``gallerygate.storage.ObjectStore``.
"""

import logging
from typing import TYPE_CHECKING

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from gallerygate.config import S3Settings
from gallerygate.errors import ObjectNotFoundError, StoreError
from gallerygate.storage import StoredObjectRecord

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client

NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})
# 412 when the object exists, 409 when a concurrent conditional write won the race
PRECONDITION_CODES = frozenset({"412", "PreconditionFailed", "409", "ConditionalRequestConflict"})


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class AsyncS3Client:
    """Asynchronous S3 Client

    This client maintains a shared aioboto3.Session that is created once and
    reused for all operations. Individual S3 clients are created per operation
    using context managers to ensure proper resource cleanup.

    All methods are async-first and do not block the event loop. Failures are
    raised as ``StoreError``; a missing key on ``get`` is raised as
    ``ObjectNotFoundError`` so callers can tell absence from breakage.
    """

    def __init__(self, settings: S3Settings | None = None):
        """Initialize the AsyncS3Client with configuration from environment."""
        self.settings = settings or S3Settings()
        self._session: aioboto3.Session | None = None
        self._endpoint_url = self._get_endpoint_url()
        self._config = Config(
            signature_version=self.settings.signature_version,
            max_pool_connections=50,
            retries={"max_attempts": 3, "mode": "standard"},
            connect_timeout=10,  # Connection timeout in seconds
            read_timeout=60,  # Read timeout in seconds
            s3={"addressing_style": "path"},
        )
        logger.info(f"AsyncS3Client initialized: endpoint={self._endpoint_url}, bucket={self.settings.bucket}, region={self.settings.region}")

    def _get_endpoint_url(self) -> str:
        """Get the endpoint URL with protocol if needed."""
        endpoint = self.settings.endpoint
        if not endpoint.startswith(("http://", "https://")):
            protocol = "https" if self.settings.use_ssl else "http"
            return f"{protocol}://{endpoint}"
        return endpoint

    @property
    def session(self) -> aioboto3.Session:
        """Get or create the shared aioboto3 session.

        The session is created once and reused for all operations.
        """
        if self._session is None:
            self._session = aioboto3.Session(
                aws_access_key_id=self.settings.access_key,
                aws_secret_access_key=self.settings.secret_key,
                region_name=self.settings.region,
            )
        return self._session

    def _get_s3_client(self) -> "S3Client":
        """Get configured S3 client context manager.

        Usage: async with self._get_s3_client() as s3:
        """
        return self.session.client("s3", endpoint_url=self._endpoint_url, config=self._config)

    async def get(self, key: str) -> bytes:
        """Download an object's content.

        Raises:
            ObjectNotFoundError: If the key does not exist
            StoreError: On any other failure
        """
        try:
            async with self._get_s3_client() as s3:
                s3: "S3Client"
                response = await s3.get_object(Bucket=self.settings.bucket, Key=key)
                body = response.get("Body")
                if body is None:
                    raise StoreError("get", key, ValueError("No body in response"))
                content: bytes = await body.read()
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                raise ObjectNotFoundError(key) from e
            logger.error(f"Failed to get object {key}: {e}")
            raise StoreError("get", key, e) from e
        except BotoCoreError as e:
            logger.error(f"Failed to get object {key}: {e}")
            raise StoreError("get", key, e) from e
        logger.debug(f"Successfully got object: {key}")
        return content

    async def exists(self, key: str) -> bool:
        """Check if an object exists in S3.

        Only a not-found answer counts as absence; any other failure is raised
        as StoreError.
        """
        try:
            async with self._get_s3_client() as s3:
                s3: "S3Client"
                await s3.head_object(Bucket=self.settings.bucket, Key=key)
            return True
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                return False
            logger.error(f"Failed to check if object exists {key}: {e}")
            raise StoreError("exists", key, e) from e
        except BotoCoreError as e:
            logger.error(f"Failed to check if object exists {key}: {e}")
            raise StoreError("exists", key, e) from e

    async def put(self, key: str, content: bytes, content_type: str | None = None) -> None:
        """Write an object, replacing any existing one."""
        await self._put_object(key, content, content_type, if_absent=False)

    async def put_if_absent(self, key: str, content: bytes, content_type: str | None = None) -> bool:
        """Write an object only when the key is free (``If-None-Match: *``).

        Returns:
            True if written, False if an object already exists under ``key``
        """
        return await self._put_object(key, content, content_type, if_absent=True)

    async def _put_object(self, key: str, content: bytes, content_type: str | None, if_absent: bool) -> bool:
        params: dict = {"Bucket": self.settings.bucket, "Key": key, "Body": content}
        if content_type:
            params["ContentType"] = content_type
        if if_absent:
            params["IfNoneMatch"] = "*"

        try:
            async with self._get_s3_client() as s3:
                s3: "S3Client"
                await s3.put_object(**params)
        except ClientError as e:
            if if_absent and _error_code(e) in PRECONDITION_CODES:
                logger.info(f"Conditional write refused, object exists: {key}")
                return False
            logger.error(f"Failed to upload object {key}: {e}")
            raise StoreError("put", key, e) from e
        except BotoCoreError as e:
            logger.error(f"Failed to upload object {key}: {e}")
            raise StoreError("put", key, e) from e
        logger.info(f"Successfully uploaded object: {key} ({len(content)} bytes)")
        return True

    async def list(self, prefix: str) -> list[StoredObjectRecord]:
        """List every object under ``prefix``, following continuation tokens."""
        records: list[StoredObjectRecord] = []
        continuation_token = None
        try:
            async with self._get_s3_client() as s3:
                s3: "S3Client"
                while True:
                    list_params: dict = {
                        "Bucket": self.settings.bucket,
                        "Prefix": prefix,
                    }
                    if continuation_token:
                        list_params["ContinuationToken"] = continuation_token

                    response = await s3.list_objects_v2(**list_params)

                    for obj in response.get("Contents", []):
                        records.append(StoredObjectRecord(key=obj["Key"], size_bytes=obj["Size"], last_modified=obj["LastModified"]))

                    if not response.get("IsTruncated"):
                        break

                    continuation_token = response.get("NextContinuationToken")
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to list objects with prefix {prefix}: {e}")
            raise StoreError("list", prefix, e) from e

        logger.info(f"Listed {len(records)} objects with prefix {prefix}")
        return records

    async def close(self) -> None:
        """Close the session and clean up resources."""
        if self._session is not None:
            logger.info("Closing AsyncS3Client session")
            # Note: aioboto3 sessions don't need explicit closing in newer versions
            self._session = None
