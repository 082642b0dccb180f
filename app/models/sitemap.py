from datetime import datetime
from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict

ChangeFrequency = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class SitemapEntry(BaseModel):
    """One ``<url>`` element of a sitemap, with its hreflang alternates."""

    model_config = ConfigDict(frozen=True)

    url: str
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float
    alternates: Dict[str, str]
