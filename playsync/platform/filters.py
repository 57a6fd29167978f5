"""Library allow/deny policy."""

from typing import Iterable, List

from playsync.core.constants.denylist import DEFAULT_DENYLIST


def filter_libraries(
    libraries: Iterable[str],
    denylist: Iterable[str] = DEFAULT_DENYLIST,
    prefix: str = "play-",
    excluded_suffix: str = "license",
) -> List[str]:
    """Keep libraries that start with ``prefix``, are not license artifacts and not denied.

    Args:
        libraries: Raw identifiers from the listing
        denylist: Identifiers that are never vendored
        prefix: Required identifier prefix
        excluded_suffix: Identifiers ending with this are dropped

    Returns:
        Surviving identifiers in input order
    """
    denied = frozenset(denylist)
    return [
        library
        for library in libraries
        if library.startswith(prefix)
        and not library.endswith(excluded_suffix)
        and library not in denied
    ]
