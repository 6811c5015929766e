"""
Tests for AsyncS3Client

Unit tests mock the aioboto3 client context manager; see
test_s3_integration.py for tests against a real MinIO container.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from gallerygate.errors import ObjectNotFoundError, StoreError
from gallerygate.s3_service import AsyncS3Client
from gallerygate.storage import StoredObjectRecord


def client_error(code: str, operation: str = "HeadObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def mock_settings():
    """Create mock S3Settings for testing."""
    settings = MagicMock()
    settings.access_key = "test-access-key"
    settings.secret_key = "test-secret-key"
    settings.bucket = "test-bucket"
    settings.region = "us-east-1"
    settings.endpoint = "localhost:9000"
    settings.use_ssl = False
    settings.signature_version = "s3v4"
    return settings


@pytest.fixture
def s3_client(mock_settings):
    with patch("gallerygate.s3_service.S3Settings", return_value=mock_settings):
        return AsyncS3Client()


@pytest.fixture
def mock_s3(s3_client):
    """Patch the session so every `async with` yields the same AsyncMock client."""
    mock_s3_client = AsyncMock()
    mock_context = AsyncMock()
    mock_context.__aenter__.return_value = mock_s3_client
    mock_context.__aexit__.return_value = None
    s3_client.session.client = MagicMock(return_value=mock_context)
    return mock_s3_client


class TestAsyncS3ClientInit:
    def test_client_initialization(self, s3_client):
        assert s3_client.settings.bucket == "test-bucket"
        assert s3_client._endpoint_url == "http://localhost:9000"

    def test_endpoint_with_ssl(self, mock_settings):
        mock_settings.use_ssl = True
        client = AsyncS3Client(settings=mock_settings)
        assert client._endpoint_url == "https://localhost:9000"

    def test_endpoint_with_scheme_is_kept(self, mock_settings):
        mock_settings.endpoint = "https://s3.ap-northeast-2.amazonaws.com"
        client = AsyncS3Client(settings=mock_settings)
        assert client._endpoint_url == "https://s3.ap-northeast-2.amazonaws.com"

    def test_session_property_creates_session_once(self, s3_client):
        assert s3_client.session is s3_client.session

    @pytest.mark.asyncio
    async def test_close_resets_session(self, s3_client):
        _ = s3_client.session
        await s3_client.close()
        assert s3_client._session is None


class TestGet:
    @pytest.mark.asyncio
    async def test_get_returns_body(self, s3_client, mock_s3):
        mock_body = AsyncMock()
        mock_body.read = AsyncMock(return_value=b"content")
        mock_s3.get_object = AsyncMock(return_value={"Body": mock_body})

        assert await s3_client.get("gallery/alice/cat.png") == b"content"
        mock_s3.get_object.assert_called_once_with(Bucket="test-bucket", Key="gallery/alice/cat.png")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["NoSuchKey", "404"])
    async def test_get_missing_key_is_typed(self, s3_client, mock_s3, code):
        mock_s3.get_object = AsyncMock(side_effect=client_error(code, "GetObject"))

        with pytest.raises(ObjectNotFoundError):
            await s3_client.get("gallery/alice/cat.png")

    @pytest.mark.asyncio
    async def test_get_other_error_is_store_error(self, s3_client, mock_s3):
        mock_s3.get_object = AsyncMock(side_effect=client_error("AccessDenied", "GetObject"))

        with pytest.raises(StoreError) as exc_info:
            await s3_client.get("gallery/alice/cat.png")

        assert exc_info.value.operation == "get"
        assert exc_info.value.key == "gallery/alice/cat.png"

    @pytest.mark.asyncio
    async def test_get_without_body(self, s3_client, mock_s3):
        mock_s3.get_object = AsyncMock(return_value={"Body": None})

        with pytest.raises(StoreError):
            await s3_client.get("gallery/alice/cat.png")


class TestExists:
    @pytest.mark.asyncio
    async def test_exists_true(self, s3_client, mock_s3):
        mock_s3.head_object = AsyncMock(return_value={})

        assert await s3_client.exists("gallery/alice/cat.png") is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["404", "NoSuchKey", "NotFound"])
    async def test_exists_false_on_not_found(self, s3_client, mock_s3, code):
        mock_s3.head_object = AsyncMock(side_effect=client_error(code))

        assert await s3_client.exists("gallery/alice/cat.png") is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["403", "AccessDenied", "500", "SlowDown"])
    async def test_exists_raises_on_other_errors(self, s3_client, mock_s3, code):
        mock_s3.head_object = AsyncMock(side_effect=client_error(code))

        with pytest.raises(StoreError):
            await s3_client.exists("gallery/alice/cat.png")

    @pytest.mark.asyncio
    async def test_exists_raises_on_connection_error(self, s3_client, mock_s3):
        mock_s3.head_object = AsyncMock(side_effect=EndpointConnectionError(endpoint_url="http://localhost:9000"))

        with pytest.raises(StoreError):
            await s3_client.exists("gallery/alice/cat.png")


class TestPut:
    @pytest.mark.asyncio
    async def test_put_sends_body_and_content_type(self, s3_client, mock_s3):
        await s3_client.put("gallery/alice/cat.png", b"content", content_type="image/png")

        mock_s3.put_object.assert_called_once_with(Bucket="test-bucket", Key="gallery/alice/cat.png", Body=b"content", ContentType="image/png")

    @pytest.mark.asyncio
    async def test_put_failure(self, s3_client, mock_s3):
        mock_s3.put_object = AsyncMock(side_effect=client_error("InternalError", "PutObject"))

        with pytest.raises(StoreError) as exc_info:
            await s3_client.put("gallery/alice/cat.png", b"content")

        assert exc_info.value.operation == "put"

    @pytest.mark.asyncio
    async def test_put_if_absent_sets_precondition(self, s3_client, mock_s3):
        assert await s3_client.put_if_absent("gallery/alice/cat.png", b"content") is True

        assert mock_s3.put_object.call_args.kwargs["IfNoneMatch"] == "*"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["PreconditionFailed", "412", "ConditionalRequestConflict"])
    async def test_put_if_absent_refused(self, s3_client, mock_s3, code):
        mock_s3.put_object = AsyncMock(side_effect=client_error(code, "PutObject"))

        assert await s3_client.put_if_absent("gallery/alice/cat.png", b"content") is False

    @pytest.mark.asyncio
    async def test_plain_put_does_not_swallow_precondition_errors(self, s3_client, mock_s3):
        mock_s3.put_object = AsyncMock(side_effect=client_error("PreconditionFailed", "PutObject"))

        with pytest.raises(StoreError):
            await s3_client.put("gallery/alice/cat.png", b"content")


class TestList:
    @pytest.mark.asyncio
    async def test_list_follows_pagination(self, s3_client, mock_s3):
        modified = datetime(2024, 5, 1, tzinfo=UTC)
        mock_s3.list_objects_v2 = AsyncMock(
            side_effect=[
                {"Contents": [{"Key": "gallery/alice/a.png", "Size": 1, "LastModified": modified}], "IsTruncated": True, "NextContinuationToken": "token-1"},
                {"Contents": [{"Key": "gallery/bob/b.png", "Size": 2, "LastModified": modified}], "IsTruncated": False},
            ]
        )

        records = await s3_client.list("gallery/")

        assert records == [
            StoredObjectRecord(key="gallery/alice/a.png", size_bytes=1, last_modified=modified),
            StoredObjectRecord(key="gallery/bob/b.png", size_bytes=2, last_modified=modified),
        ]
        second_call = mock_s3.list_objects_v2.call_args_list[1]
        assert second_call.kwargs == {"Bucket": "test-bucket", "Prefix": "gallery/", "ContinuationToken": "token-1"}

    @pytest.mark.asyncio
    async def test_list_empty_bucket(self, s3_client, mock_s3):
        mock_s3.list_objects_v2 = AsyncMock(return_value={"IsTruncated": False, "KeyCount": 0})

        assert await s3_client.list("gallery/") == []

    @pytest.mark.asyncio
    async def test_list_failure(self, s3_client, mock_s3):
        mock_s3.list_objects_v2 = AsyncMock(side_effect=client_error("AccessDenied", "ListObjectsV2"))

        with pytest.raises(StoreError) as exc_info:
            await s3_client.list("gallery/")

        assert exc_info.value.operation == "list"
