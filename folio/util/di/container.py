"""Production container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from folio.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build the container serving real traffic.

    Every component uses its production wiring: PostgreSQL and the hosted
    Supabase project. Settings come from the environment.
    """
    providers = [base.implementation(mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to handlers
    return make_async_container(*providers, FastapiProvider())
