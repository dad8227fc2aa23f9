"""
Fulfillment dispatch outcome

Forwarding a paid order to DSers is best-effort: the forwarder reports
what happened through this result instead of raising.

Author: TM3
Date: 2026-10-19
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class FulfillmentStatus(str, Enum):
    FORWARDED = "forwarded"
    SKIPPED = "skipped"
    FAILED = "failed"


class FulfillmentResult(BaseModel):
    status: FulfillmentStatus
    message: Optional[str] = None
    response: Optional[Dict[str, Any]] = Field(None, description="Supplier response body")

    @property
    def ok(self) -> bool:
        return self.status == FulfillmentStatus.FORWARDED

    @classmethod
    def forwarded(cls, response: Dict[str, Any]) -> "FulfillmentResult":
        return cls(status=FulfillmentStatus.FORWARDED, response=response)

    @classmethod
    def skipped(cls, message: str) -> "FulfillmentResult":
        return cls(status=FulfillmentStatus.SKIPPED, message=message)

    @classmethod
    def failed(cls, message: str) -> "FulfillmentResult":
        return cls(status=FulfillmentStatus.FAILED, message=message)
