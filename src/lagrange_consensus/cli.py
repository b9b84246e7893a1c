# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``lagrange-consensus recover FILE``."""

from __future__ import annotations

import json
from typing import Optional

import click
from tabulate import tabulate
from tqdm import tqdm

from .consensus import Secret, build_tally, secret_from_tally
from .decoding import decode_digits
from .errors import ConsensusError, InsufficientSharesError
from .loader import load_file
from .policy import policy
from .subsets import count_subsets
from .utils.logging import configure_logging, get_logger

logger = get_logger("cli")

_LEVELS = click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False)


def _format_text(secret: Secret) -> str:
    if secret.is_integer:
        line = f"Constant C value: {secret.integer}"
    else:
        line = f"Constant (rational): {secret.value}"
    trusted = ", ".join(str(share.x) for share in secret.subset)
    return f"{line}\nTrusted shares (x): {trusted}\nSupport: {secret.support}/{secret.total} subsets"


@click.group()
@click.option("--log-level", type=_LEVELS, default=None, help="Logging verbosity (default from LAGRANGE_LOG_LEVEL).")
def main(log_level: Optional[str]) -> None:
    """Recover a polynomial's constant term from possibly corrupted shares."""
    configure_logging(log_level or policy.log_level)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "fmt", type=click.Choice(["text", "json"]), default="text", show_default=True)
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Worker processes (default from LAGRANGE_WORKERS).")
@click.option("--exclude-degenerate", is_flag=True, help="Drop subsets with duplicate x instead of failing.")
@click.option("--show-tally", type=click.IntRange(min=1), default=None, help="Print the N best-supported candidates.")
@click.option("--progress", is_flag=True, help="Show a progress bar over the subsets.")
def recover(
    path: str,
    fmt: str,
    workers: Optional[int],
    exclude_degenerate: bool,
    show_tally: Optional[int],
    progress: bool,
) -> None:
    """Recover the secret from the share document at PATH (JSON or YAML)."""
    try:
        share_set = load_file(path)
        if share_set.n < share_set.k:
            raise InsufficientSharesError(share_set.n, share_set.k)
        total = count_subsets(share_set.n, share_set.k)
        if total > policy.max_combinations:
            raise click.ClickException(
                f"{total} subsets exceed the limit of {policy.max_combinations} (LAGRANGE_MAX_COMBINATIONS)"
            )
        options = {
            "workers": workers or policy.workers,
            "batch_size": policy.batch_size,
            "exclude_degenerate": exclude_degenerate,
        }
        with tqdm(total=total, unit="subset", disable=not progress, file=click.get_text_stream("stderr")) as bar:
            tally = build_tally(share_set.shares, share_set.k, progress=bar.update, **options)
        secret = secret_from_tally(tally, share_set.shares)
    except (ConsensusError, OSError) as exc:
        logger.debug("recovery failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc

    if fmt == "json":
        click.echo(json.dumps(secret.to_dict()))
    else:
        click.echo(_format_text(secret))

    if show_tally:
        rows = [
            (str(entry.result), entry.count, ", ".join(str(share_set.shares[i].x) for i in entry.subset))
            for entry in tally.most_common(show_tally)
        ]
        click.echo(tabulate(rows, headers=["candidate", "votes", "first subset (x)"]), err=fmt == "json")


@main.command()
@click.argument("value")
@click.option("--base", required=True, help="Numeral base of VALUE (2-36).")
def decode(value: str, base: str) -> None:
    """Decode VALUE written in BASE and print it in decimal."""
    try:
        click.echo(decode_digits(value, base))
    except ConsensusError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
