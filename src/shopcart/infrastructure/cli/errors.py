"""Translation of domain errors into CLI errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from shopcart.domain.exceptions import DomainException, StorageFault


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn domain exceptions into ``click.ClickException``.

    Storage faults are already logged by the unit of work; the user only
    sees a generic message.
    """
    try:
        yield
    except StorageFault as exc:
        raise click.ClickException("Internal error") from exc
    except DomainException as exc:
        raise click.ClickException(str(exc)) from exc
