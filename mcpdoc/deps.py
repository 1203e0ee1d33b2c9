"""Shared dependency container for the fetch path."""

import httpx
from pydantic import BaseModel, ConfigDict, Field

from mcpdoc.policy import FetchPolicy


class Deps(BaseModel):
    """Dependency container passed to fetch functions.

    Deps carries the read-only state of one server:
    - policy: allowed origins and local files
    - follow_redirects / timeout: request behaviour
    - http_client: optional shared client (one is opened per call otherwise)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    policy: FetchPolicy
    follow_redirects: bool = False
    timeout: float = Field(default=10.0, gt=0, description="Request deadline in seconds")
    http_client: httpx.AsyncClient | None = None
