"""Repository listing providers."""

from ._base import ListingProvider
from .mvnrepository import MvnRepositoryListingProvider

__all__ = ["ListingProvider", "MvnRepositoryListingProvider"]
