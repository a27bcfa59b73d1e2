"""
Face matching models and schemas.

Dependencies: pydantic
System role: Match API contracts
"""

from pydantic import BaseModel, ConfigDict, Field

from lastnightpix.core.keys import from_external_id


class FaceMatch(BaseModel):
    """A single face hit returned by the face collection."""

    external_image_id: str = ""
    similarity: float = 0.0
    face_id: str | None = None

    @property
    def s3_key(self) -> str:
        """Photo key the matched face was indexed from."""
        return from_external_id(self.external_image_id)


class MatchResponse(BaseModel):
    """Best single match for a selfie."""

    model_config = ConfigDict(populate_by_name=True)

    match_found: bool = Field(alias="matchFound")
    image_url: str | None = Field(default=None, alias="imageUrl")
    full_image_url: str | None = Field(default=None, alias="fullImageUrl")
    similarity: float | None = None
    s3_key: str | None = Field(default=None, alias="s3Key")
    error: str | None = None


class GalleryItem(BaseModel):
    """One photo in a gallery match."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    similarity: float
    image_url: str = Field(alias="imageUrl")


class GalleryResponse(BaseModel):
    """All photos matching a selfie."""

    model_config = ConfigDict(populate_by_name=True)

    match_found: bool = Field(alias="matchFound")
    count: int = 0
    results: list[GalleryItem] = Field(default_factory=list)
    error: str | None = None
