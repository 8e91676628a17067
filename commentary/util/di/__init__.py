"""Dependency injection module.

Providers come in two kinds:

- Concrete providers (config, domain, application) have no subclasses and
  are always used as they are.
- Component providers (persistence, notification) are abstract bases whose
  subclasses are the production and mock implementations. Mock subclasses
  live in the test suite and are registered by importing it.
"""

from typing import Type

from commentary.util.di.application import ProdApplicationProvider
from commentary.util.di.base import Component, ProviderBase
from commentary.util.di.core import ProdConfigProvider
from commentary.util.di.domain import ProdDomainProvider
from commentary.util.di.infrastructure import (
    NotificationProvider,
    PersistenceProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)
from commentary.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    NotificationProvider,
]


def is_component(base: Type[ProviderBase]) -> bool:
    """Whether a provider base has swappable implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a base.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the mock implementation of a component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind
    """
    if not is_component(base):
        return base

    by_kind = {
        getattr(impl, "__is_mock__", False): impl for impl in base.__subclasses__()
    }
    impl = by_kind.get(use_mock)

    if impl is None:
        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(
            f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
        )

    return impl


__all__ = [
    "Component",
    "NotificationProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "is_component",
]
