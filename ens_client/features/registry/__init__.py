"""Registry feature: ownership and resolver pointers keyed by node."""

from ens_client.features.registry.service import RegistryService

__all__ = ["RegistryService"]
