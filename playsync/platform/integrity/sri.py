"""Subresource-integrity (SRI) digests.

An integrity value is a whitespace-separated list of ``<algo>-<base64>``
hashes, each optionally followed by ``?options``. Checking picks the
strongest supported algorithm present and accepts the file if any expected
digest for that algorithm matches.
"""

import base64
import hashlib
from pathlib import Path
from typing import Dict, List, Union

from playsync.core.exceptions import ConfigError, IntegrityError

# Weakest to strongest
ALGORITHM_PRIORITY = ("sha1", "sha256", "sha384", "sha512")

CHUNK_SIZE = 1024 * 1024


def parse_integrity(value: str) -> Dict[str, List[str]]:
    """Parse an SRI string into ``{algorithm: [base64 digests]}``.

    Unknown algorithms and malformed tokens are ignored.
    """
    parsed: Dict[str, List[str]] = {}
    for token in value.split():
        algorithm, sep, digest = token.partition("-")
        if not sep or not digest:
            continue
        algorithm = algorithm.lower()
        if algorithm not in ALGORITHM_PRIORITY:
            continue
        digest = digest.split("?", 1)[0]
        parsed.setdefault(algorithm, []).append(digest)
    return parsed


def pick_algorithm(parsed: Dict[str, List[str]]) -> str:
    """Return the strongest algorithm present in a parsed integrity value."""
    for algorithm in reversed(ALGORITHM_PRIORITY):
        if algorithm in parsed:
            return algorithm
    raise ConfigError("Integrity value contains no supported hash algorithm")


def file_digest(path: Union[str, Path], algorithm: str) -> str:
    """Return the base64 digest of a file, read in chunks."""
    hasher = hashlib.new(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            hasher.update(chunk)
    return base64.b64encode(hasher.digest()).decode("ascii")


def compute_integrity(path: Union[str, Path], algorithm: str = "sha512") -> str:
    """Compute the SRI string of a file."""
    return f"{algorithm}-{file_digest(path, algorithm)}"


def check_integrity(path: Union[str, Path], integrity: str) -> str:
    """Verify a file against an SRI string.

    Args:
        path: File to check
        integrity: Expected SRI string

    Returns:
        The matching ``<algo>-<digest>`` hash

    Raises:
        ConfigError: If the integrity value has no supported hash
        IntegrityError: If the file digest does not match
    """
    parsed = parse_integrity(integrity)
    algorithm = pick_algorithm(parsed)
    actual = file_digest(path, algorithm)
    if actual not in parsed[algorithm]:
        raise IntegrityError(str(path), integrity, f"{algorithm}-{actual}")
    return f"{algorithm}-{actual}"
