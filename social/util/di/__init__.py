"""Dependency injection module.

Concrete providers are used as-is. A provider with subclasses is a
mockable component: production and test implementations subclass it and
are told apart by ``__is_mock__``.
"""

from typing import Type

from social.util.di.application import ProdApplicationProvider
from social.util.di.base import Component, ProviderBase
from social.util.di.core import ProdConfigProvider
from social.util.di.domain import ProdDomainProvider
from social.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the test implementation of a mockable component

    Raises:
        ValueError: If the component has no matching implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
