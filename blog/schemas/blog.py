import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PostSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    title: str
    date: datetime.date
    tags: List[str] = Field(default_factory=list)
    summary: Optional[str] = None


class PostDetail(PostSummary):
    html_content: str  # rendered markup, embed as-is


class ReloadResult(BaseModel):
    posts: int
    tags: int
