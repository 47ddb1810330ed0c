from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from ..errors import EnvelopeInvalidError
from ..spec.models import TransactionEnvelope


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(files: tuple[Path, ...]) -> None:
    """Check envelope files against the envelope schema."""
    failed = 0
    for path in files:
        try:
            envelope = TransactionEnvelope.from_path(path)
        except json.JSONDecodeError as exc:
            failed += 1
            click.secho(f"  FAIL {path}: invalid JSON ({exc})", fg="red")
            continue
        except EnvelopeInvalidError as exc:
            failed += 1
            click.secho(f"  FAIL {path}", fg="red")
            for err in exc.errors:
                click.echo(f"    - {err}")
            continue
        click.echo(f"  ok   {path} ({envelope.op})")

    if failed:
        click.secho(f"{failed} of {len(files)} envelopes invalid.", fg="red")
        sys.exit(EnvelopeInvalidError.exit_code)
    click.secho("All envelopes valid.", fg="green")
