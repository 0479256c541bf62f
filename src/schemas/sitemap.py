from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ChangeFrequency(str, Enum):
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"


class SitemapEntry(BaseModel):
    url: str
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float = Field(ge=0.0, le=1.0)
