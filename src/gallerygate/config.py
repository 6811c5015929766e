from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class S3Settings(BaseSettings):
    """Configuration for the S3 client"""

    endpoint: str = "localhost:9000"
    access_key: str = "minioadmin"
    secret_key: str = "minioadmin"
    bucket: str = "gallerygate"
    region: str = "us-east-1"
    use_ssl: bool = False
    signature_version: str = "s3v4"

    model_config = SettingsConfigDict(
        env_prefix="S3_",
        env_file=".env",
        extra="ignore",
    )


class GallerySettings(BaseSettings):
    """Upload and listing behaviour of the gallery namespace."""

    key_prefix: str = "gallery"
    time_zone: str = "+09:00"  # Asia/Seoul
    # Requires a store that honours If-None-Match on PutObject (AWS S3, recent MinIO)
    conditional_writes: bool = False
    max_upload_bytes: int = 15 * 1024 * 1024  # 15 MB

    model_config = SettingsConfigDict(
        env_prefix="GALLERY_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_s3_settings() -> S3Settings:
    """Get cached S3 settings."""
    return S3Settings()


@lru_cache(maxsize=1)
def get_gallery_settings() -> GallerySettings:
    return GallerySettings()
