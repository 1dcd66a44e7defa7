"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from social.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container from ``PROVIDERS``.

    Nothing connects to the database until a request first needs a session.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to the app; a later call replaces the container."""
    setup_dishka(container, app)
