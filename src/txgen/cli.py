"""Typer CLI: write a synthetic transaction dataset to stdout."""

from __future__ import annotations

import sys

import typer

from txgen.config import get_config, get_config_hash, generation_params
from txgen.generator import write_dataset
from txgen.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(help="Synthetic transaction stream generator for payments-engine load tests")


@app.command()
def generate(
    record_count: int | None = typer.Option(
        None, "--record-count", "-n", help="Number of data lines (default 100000)"
    ),
    max_client_id: int | None = typer.Option(
        None, "--max-client-id", help="Inclusive upper bound for client ids (default 5000)"
    ),
    max_amount: int | None = typer.Option(
        None, "--max-amount", help="Inclusive upper bound for amounts (default 1000)"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for reproducible output (default: unseeded)"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level for stderr (overrides config)"
    ),
) -> None:
    """Write `type, client, tx, amount` header and records to stdout."""
    try:
        cfg = get_config(config)
        params = generation_params(
            cfg,
            record_count=record_count,
            max_client_id=max_client_id,
            max_amount=max_amount,
            seed=seed,
        )
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    if params.record_count < 1:
        typer.echo("record_count must be a positive integer", err=True)
        raise typer.Exit(1)
    setup_logging(log_level or cfg.get("app", {}).get("log_level", "INFO"))

    resolved = {**cfg, "generator": params.model_dump()}
    stats = write_dataset(sys.stdout, params)
    logger.info(
        "Wrote %d records (primary=%d, referencing=%d, by_kind=%s, seed=%s, config_hash=%s)",
        stats.records,
        stats.primary,
        stats.referencing,
        stats.by_kind,
        params.seed,
        get_config_hash(resolved)[:12],
    )


if __name__ == "__main__":
    app()
