"""Transaction stream generation: header + one record per sequence position."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

from txgen.logging_config import get_logger
from txgen.random_source import PythonRandomSource, RandomSource
from txgen.schemas import (
    DEFAULT_MAX_AMOUNT,
    DEFAULT_MAX_CLIENT_ID,
    DEFAULT_RECORD_COUNT,
    REFERENCING_KINDS,
    GenerationParams,
    TransactionRecord,
    TxKind,
)

logger = get_logger(__name__)

HEADER = "type, client, tx, amount"

# Sampling order of kinds; index drawn uniformly from [0, len - 1].
KINDS: tuple[TxKind, ...] = (
    TxKind.DEPOSIT,
    TxKind.WITHDRAWAL,
    TxKind.DISPUTE,
    TxKind.RESOLVE,
    TxKind.CHARGEBACK,
)


@dataclass
class GenerationStats:
    """Counts for one written dataset (fixed size, independent of record_count)."""

    records: int = 0
    primary: int = 0
    by_kind: dict[str, int] = field(default_factory=lambda: {k.value: 0 for k in KINDS})

    @property
    def referencing(self) -> int:
        return self.records - self.primary

    def add(self, record: TransactionRecord) -> None:
        self.records += 1
        self.by_kind[record.kind.value] += 1
        if record.is_primary:
            self.primary += 1


def sample_record(position: int, params: GenerationParams, rng: RandomSource) -> TransactionRecord:
    """
    Draw the record at 1-based `position`.
    Draw order: kind, client, tx_ref (referencing kinds only), amount.
    """
    kind = KINDS[rng.next_uniform_int(0, len(KINDS) - 1)]
    client_id = rng.next_uniform_int(1, params.max_client_id)
    if kind in REFERENCING_KINDS:
        # Any id issued so far, including ids of other referencing records.
        tx_ref = rng.next_uniform_int(1, position)
    else:
        tx_ref = position
    amount = rng.next_uniform_int(1, params.max_amount)
    return TransactionRecord(kind=kind, client_id=client_id, tx_ref=tx_ref, amount=amount)


def iter_records(params: GenerationParams, rng: RandomSource) -> Iterator[TransactionRecord]:
    """Yield records for positions 1..record_count in ascending order."""
    for position in range(1, params.record_count + 1):
        yield sample_record(position, params, rng)


def _lines(params: GenerationParams, rng: RandomSource) -> Iterator[str]:
    yield HEADER
    for record in iter_records(params, rng):
        yield record.to_line()


def generate(
    record_count: int = DEFAULT_RECORD_COUNT,
    max_client_id: int = DEFAULT_MAX_CLIENT_ID,
    max_amount: int = DEFAULT_MAX_AMOUNT,
    seed: int | None = None,
    rng: RandomSource | None = None,
) -> Iterator[str]:
    """
    Return a lazy iterator over the header and `record_count` formatted lines
    (without trailing newlines). Parameters are validated before the iterator
    is returned, so invalid input raises InvalidArgument with nothing emitted.
    An explicit `rng` takes precedence over `seed`.
    """
    params = GenerationParams.build(
        record_count=record_count,
        max_client_id=max_client_id,
        max_amount=max_amount,
        seed=seed,
    )
    return _lines(params, rng or PythonRandomSource(params.seed))


def write_dataset(
    sink: TextIO,
    params: GenerationParams,
    rng: RandomSource | None = None,
) -> GenerationStats:
    """Write header + records to sink, newline-terminated, in emission order.

    Errors raised by the sink (e.g. BrokenPipeError) propagate.
    """
    source = rng or PythonRandomSource(params.seed)
    logger.debug(
        "Generating %d records (max_client_id=%d, max_amount=%d, seed=%s)",
        params.record_count,
        params.max_client_id,
        params.max_amount,
        params.seed,
    )
    stats = GenerationStats()
    sink.write(HEADER + "\n")
    for record in iter_records(params, source):
        sink.write(record.to_line() + "\n")
        stats.add(record)
    sink.flush()
    return stats
