"""Translate domain errors into click failures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from backoffice.domain.exceptions import DomainException

logger = logging.getLogger(__name__)


@contextmanager
def domain_errors() -> Iterator[None]:
    try:
        yield
    except DomainException as exc:
        logger.debug("Command failed: %r", exc)
        raise click.ClickException(str(exc)) from exc
