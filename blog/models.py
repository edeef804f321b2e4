import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Frontmatter(BaseModel):
    """Metadata block at the top of a post file."""

    model_config = ConfigDict(extra="ignore")

    title: str
    date: str
    tags: List[str] = Field(default_factory=list)
    summary: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_as_string(cls, value):
        # YAML resolves bare 2024-01-31 to a date object
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    date: datetime.date
    tags: Tuple[str, ...] = ()
    summary: str
    html_content: str
