"""Response schemas for the quota API"""

from pydantic import BaseModel, Field

from src.app.services.quota_gate import QuotaGate


class QuotaCounterSchema(BaseModel):
    count: int = Field(..., description="Documents already created on this installation")
    limit: int
    remaining: int
    locked: bool = Field(..., description="True when the caller would be refused")

    @classmethod
    def from_gate(cls, gate: QuotaGate, is_guest: bool) -> "QuotaCounterSchema":
        return cls(
            count=gate.count(),
            limit=gate.limit,
            remaining=gate.remaining(),
            locked=gate.has_reached_limit(is_guest),
        )


class QuotaStatusSchema(BaseModel):
    is_guest: bool
    invoices: QuotaCounterSchema
    exports: QuotaCounterSchema
