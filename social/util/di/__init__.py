"""Dependency injection module."""

from typing import Type

from social.util.di.application import ProdApplicationProvider
from social.util.di.base import Component, ProviderBase
from social.util.di.core import ProdConfigProvider
from social.util.di.domain import ProdDomainProvider
from social.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for ``base``.

    A base without subclasses is concrete and installed as is. A base with
    subclasses is a mockable component: exactly one subclass must match
    ``use_mock`` through its ``__is_mock__`` flag. Mock implementations are
    only visible once their module (under ``tests.di``) is imported.

    Args:
        base: Provider base class
        use_mock: Whether to use the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If no implementation, or more than one, matches
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    component_name = getattr(base, "__mock_component__", None) or base.__name__
    kind = "mock" if use_mock else "production"
    matches = [c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock]

    if not matches:
        raise ValueError(f"No {kind} implementation for {component_name}")
    if len(matches) > 1:
        names = ", ".join(sorted(c.__name__ for c in matches))
        raise ValueError(
            f"Ambiguous {kind} implementations for {component_name}: {names}"
        )

    return matches[0]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
