from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


class ImageUploadRequest(BaseModel):
    image_name: str = Field(..., description="Name of the image inside the caller's namespace")
    image_content: str = Field(..., description="Base64 encoded image bytes")
    force: StrictBool | StrictStr | None = Field(None, description="Overwrite an existing image: yes/y/ok/true or no/n/false")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GalleryEntry(BaseModel):
    image_name: str
    size: int = Field(..., ge=0)
    path: str
    uploader: str
    last_modified: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectionFailure(BaseModel):
    """Stands in for a listed object whose key could not be parsed."""

    path: str
    error: str
