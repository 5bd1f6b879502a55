"""Subdomain feature module.

This module provides subdomain lifecycle management:
- Create a child node under an owned parent
- Transfer a child node to a new owner
- Delete a child node, optionally clearing its resolver
"""

from ens_client.features.subdomain.service import SubdomainService

__all__ = ["SubdomainService"]
