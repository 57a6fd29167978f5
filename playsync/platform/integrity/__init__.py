"""Integrity digests and verified downloads."""

from .sri import check_integrity, compute_integrity, parse_integrity
from .verifier import IntegrityVerifier

__all__ = ["IntegrityVerifier", "check_integrity", "compute_integrity", "parse_integrity"]
