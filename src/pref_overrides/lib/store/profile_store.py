"""File-backed preference store over a browser profile's prefs file."""

import logging
import tempfile
from pathlib import Path
from typing import Union

from pref_overrides.config import PREFS_HEADER
from pref_overrides.lib.overrides.models import OverrideSet, PreferenceOverride
from pref_overrides.lib.overrides.parser import dump, load
from pref_overrides.lib.store.base import PreferenceStore

logger = logging.getLogger(__name__)


class ProfilePrefsStore(PreferenceStore):
    """Preference store backed by a profile's ``user.js`` or ``prefs.js``."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        """
        Open a prefs file. A missing file starts out empty.

        Args:
            path (str | Path): Prefs file to read and write
            encoding (str): Text encoding of the file

        Raises:
            ParseError: If the existing file contains a malformed directive
        """
        super().__init__()
        self.path = Path(path)
        self.encoding = encoding
        self._load()

    def _load(self) -> None:
        """Read existing ``user_pref`` directives from the file."""
        self._comment_lines = 0
        if not self.path.exists():
            logger.info(f"Prefs file {self.path} does not exist yet, starting empty")
            return

        text = self.path.read_text(encoding=self.encoding)
        existing = load(text, source_name=str(self.path))
        self._values = existing.as_dict()

        header_lines = set(PREFS_HEADER.splitlines())
        self._comment_lines = sum(
            1
            for line in text.splitlines()
            if line.strip().startswith(("//", "/*")) and line not in header_lines
        )
        logger.debug(f"Read {len(self._values)} preferences from {self.path}")

    def save(self) -> None:
        """
        Write all preferences back to the file, in insertion order.

        The new content goes to a temporary file beside the target, which then
        replaces it, so a failed write leaves the previous file intact.

        Raises:
            OSError: If the file cannot be written
        """
        override_set = OverrideSet(
            PreferenceOverride(name, value) for name, value in self.items()
        )

        if self._comment_lines:
            logger.warning(
                f"Rewriting {self.path} drops {self._comment_lines} comment lines"
            )

        with tempfile.NamedTemporaryFile(
            "w",
            encoding=self.encoding,
            newline="\n",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            try:
                f.write(dump(override_set, header=PREFS_HEADER))
            except BaseException:
                f.close()
                tmp_path.unlink()
                raise

        try:
            tmp_path.replace(self.path)
        except BaseException:
            tmp_path.unlink()
            raise

        self._dirty = False
        self._comment_lines = 0
        logger.info(f"Saved {len(override_set)} preferences to {self.path}")

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Save pending changes unless the block raised."""
        if exc_type is None and self.dirty:
            self.save()
        self.close()
