"""Test container with per-component choice of mock or production wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from folio.util.di import PROVIDERS, Component, mockable_components

# Registers the mock wirings as subclasses of their components
from . import persistence, supabase  # noqa: F401


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Args:
        unmock: Components to wire to production instead

    Returns:
        Container usable directly or behind a TestClient app

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        # Unit and e2e tests: in-memory store, in-memory Supabase
        container = build_test_container()

        # Integration tests: PostgreSQL, in-memory Supabase
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        base.implementation(mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
