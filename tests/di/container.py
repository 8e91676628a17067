"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from commentary.util.di import PROVIDERS, Component, get_provider, is_component


def mockable_components() -> set[Component]:
    """Names of every component that has a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if is_component(base) and base.__mock_component__
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where components use mocks unless unmocked.

    Concrete providers (config, domain, application) are always real.
    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Real notifier, in-memory repositories
        container = build_test_container(unmock={"notification"})
    """
    unmock = unmock or set()

    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=is_component(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
