import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ArticleMetadata(BaseModel):
    # Unknown front matter keys are kept as extension fields
    model_config = ConfigDict(extra="allow")

    slug: str
    title: str
    date: datetime.datetime
    excerpt: Optional[str] = None
    draft: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_datetime(cls, value):
        # YAML loads bare dates as datetime.date
        if isinstance(value, datetime.date) and not isinstance(
            value, datetime.datetime
        ):
            return datetime.datetime.combine(value, datetime.time.min)
        # Numbers would otherwise be read as Unix timestamps
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            raise ValueError(f"date must be ISO-8601, got number {value!r}")
        if isinstance(value, str):
            return _parse_iso_datetime(value)
        return value

    @field_validator("date")
    @classmethod
    def _date_as_utc(cls, value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value.astimezone(datetime.timezone.utc)


def _parse_iso_datetime(value: str) -> datetime.datetime:
    text = value.strip()
    if text.isdigit():
        raise ValueError(f"date must be ISO-8601, got {value!r}")
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        return datetime.datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"date must be ISO-8601, got {value!r}") from None


class ArticleDetail(BaseModel):
    body: str
    metadata: ArticleMetadata


class ArticlePath(BaseModel):
    slug: str
