"""Resolver feature: address and content records for a node."""

from ens_client.features.resolver.service import DomainDetails, ResolverService

__all__ = ["DomainDetails", "ResolverService"]
