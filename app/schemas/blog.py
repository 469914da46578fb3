from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

IGNORED_PAYLOAD_KEYS = ("slug", "url_name")


class Post(BaseModel):
    """A single blog entry as stored on disk, plus its load-time slug."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(..., min_length=1)
    body: str
    image_url: str = ""
    summary: str = ""
    publish_at: datetime = Field(..., alias="timestamp")
    tags: List[str] = Field(default_factory=list)
    slug: str = ""

    @field_validator("publish_at")
    @classmethod
    def _as_utc_instant(cls, value: datetime) -> datetime:
        # Offset-less timestamps are taken to be UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @classmethod
    def from_payload(cls, payload: dict, slug: str) -> "Post":
        data = {k: v for k, v in payload.items() if k not in IGNORED_PAYLOAD_KEYS}
        return cls.model_validate({**data, "slug": slug})

    def to_payload(self) -> dict:
        """The persisted JSON shape; the slug is never written back."""
        return self.model_dump(by_alias=True, mode="json", exclude={"slug"})


class PostCard(BaseModel):
    slug: str
    title: str
    image_url: str = ""
    published: str
    summary: str = ""
    link: str
    tags: List[str] = Field(default_factory=list)


class PostPage(BaseModel):
    slug: str
    title: str
    image_url: str = ""
    published: str
    summary: str = ""
    tags: List[str] = Field(default_factory=list)
    reading_time: str
    content_html: str
