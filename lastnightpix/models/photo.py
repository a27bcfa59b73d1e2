"""
Photo domain models and schemas.

Upload response contracts and storage value objects.

Dependencies: pydantic
System role: Photo API contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IndexResult(BaseModel):
    """Outcome of storing and indexing one photo."""

    s3_key: str = Field(description="Object key in the photo bucket")
    external_id: str = Field(description="Rekognition ExternalImageId for the photo")
    indexed_faces: int = Field(default=0, description="Number of faces added to the collection")


class StoredObject(BaseModel):
    """An object opened for streaming out of the bucket."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: str
    body: Any = Field(description="botocore StreamingBody")
    content_type: str | None = None
    content_length: int | None = None


class UploadResponse(BaseModel):
    """Response schema for a successful upload."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    s3_key: str = Field(alias="s3Key")
    external_id: str = Field(alias="externalId")
    indexed_faces: int = Field(alias="indexedFaces")


class UploadErrorResponse(BaseModel):
    """Response schema for a failed upload."""

    success: bool = False
    error: str
