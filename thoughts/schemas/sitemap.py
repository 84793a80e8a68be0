import datetime
from typing import Literal

from pydantic import BaseModel

ChangeFrequency = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never"
]


class SitemapEntry(BaseModel):
    url: str
    lastModified: datetime.datetime
    changeFrequency: ChangeFrequency
    priority: float
