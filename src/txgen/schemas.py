"""Pydantic v2 schemas for records and generation parameters."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError

FIELD_SEPARATOR = ", "

DEFAULT_RECORD_COUNT = 100_000
DEFAULT_MAX_CLIENT_ID = 5_000
DEFAULT_MAX_AMOUNT = 1_000


class InvalidArgument(ValueError):
    """Raised for non-positive bounds or a negative record count, before any output."""


class TxKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


# Primary kinds mint a new transaction id; referencing kinds point at an issued one.
PRIMARY_KINDS = frozenset({TxKind.DEPOSIT, TxKind.WITHDRAWAL})
REFERENCING_KINDS = frozenset({TxKind.DISPUTE, TxKind.RESOLVE, TxKind.CHARGEBACK})


class TransactionRecord(BaseModel):
    """One emitted line. Amount is an already-scaled fixed-point integer."""

    model_config = ConfigDict(frozen=True)

    kind: TxKind
    client_id: int = Field(..., ge=1)
    tx_ref: int = Field(..., ge=1)
    amount: int = Field(..., ge=1)

    @property
    def is_primary(self) -> bool:
        return self.kind in PRIMARY_KINDS

    def to_line(self) -> str:
        """Render as `<kind>, <client_id>, <tx_ref>, <amount>` (no newline)."""
        return FIELD_SEPARATOR.join(
            (self.kind.value, str(self.client_id), str(self.tx_ref), str(self.amount))
        )


class GenerationParams(BaseModel):
    """Bounds for one generation run. record_count=0 yields a header-only dataset."""

    model_config = ConfigDict(frozen=True, strict=True)

    record_count: int = Field(default=DEFAULT_RECORD_COUNT, ge=0)
    max_client_id: int = Field(default=DEFAULT_MAX_CLIENT_ID, ge=1)
    max_amount: int = Field(default=DEFAULT_MAX_AMOUNT, ge=1)
    seed: int | None = None

    @classmethod
    def build(cls, **values: object) -> GenerationParams:
        """Validate values; raise InvalidArgument with a `field: message` description."""
        try:
            return cls(**values)  # type: ignore[arg-type]
        except ValidationError as e:
            raise InvalidArgument(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "params"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)
