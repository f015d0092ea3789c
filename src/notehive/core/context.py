"""Per-request identity passed explicitly from the auth dependency to services."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class RequestContext:
    viewer_id: Optional[UUID] = None

    @property
    def is_authenticated(self) -> bool:
        return self.viewer_id is not None


ANONYMOUS = RequestContext()
