"""Lockfile persistence.

The lockfile is a JSON array of ``{url, name, integrity}`` objects, indented
with tabs. It is always written and read as a whole.
"""

import json
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from playsync.core.exceptions import LockfileError, LockfileNotFoundError
from playsync.core.logging import ContextualLogger
from playsync.core.logging import logger as default_logger
from playsync.schemas.lockfile import LockEntry, LockEntryList


class LockfileManager:
    """Reads and writes the library lockfile."""

    def __init__(self, path: Union[str, Path], logger: Optional[ContextualLogger] = None):
        """Initialize the lockfile manager.

        Args:
            path: Location of the lockfile
            logger: Optional contextual logger
        """
        self.path = Path(path)
        self.logger = logger or default_logger.with_context(component="lockfile")

    def write(self, entries: Iterable[LockEntry]) -> None:
        """Replace the lockfile with ``entries``.

        The document is written to a temporary sibling and moved into place,
        so readers never observe a partial lockfile.
        """
        payload = [entry.model_dump(mode="json") for entry in entries]
        content = json.dumps(payload, indent="\t") + "\n"

        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(f".{self.path.name}.tmp")
        temp_path.write_text(content, encoding="utf-8")
        os.replace(temp_path, self.path)

        self.logger.info(f"Wrote {len(payload)} entries to {self.path}")

    def read(self) -> List[LockEntry]:
        """Read every entry from the lockfile.

        Raises:
            LockfileNotFoundError: If the lockfile does not exist
            LockfileError: If the lockfile is not a valid entry list
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise LockfileNotFoundError(
                f"Lockfile not found at {self.path}; run 'upgrade' to create it"
            ) from e

        try:
            return LockEntryList.validate_json(raw)
        except ValidationError as e:
            raise LockfileError(f"Invalid lockfile {self.path}: {e}") from e
