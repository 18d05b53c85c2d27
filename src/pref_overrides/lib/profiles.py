"""Locating browser profiles from profiles.ini."""

import configparser
import logging
from pathlib import Path
from typing import List, Optional

from pref_overrides.config import BROWSER_BASE_DIRS, PROFILES_INI
from pref_overrides.lib.overrides.errors import ProfileError

logger = logging.getLogger(__name__)


def candidate_base_dirs(home: Optional[Path] = None) -> List[Path]:
    """
    List the standard browser base directories for a user.

    Args:
        home (Path, optional): Home directory, defaults to the current user's

    Returns:
        List[Path]: Candidate directories that may contain profiles.ini
    """
    home = home or Path.home()
    return [home / rel for rel in BROWSER_BASE_DIRS]


def read_profiles_ini(base_dir: Path) -> configparser.ConfigParser:
    """Parse the profiles.ini of a browser base directory."""
    ini_path = base_dir / PROFILES_INI
    if not ini_path.is_file():
        raise ProfileError(f"{PROFILES_INI} not found at: {ini_path}")

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(ini_path, encoding="utf-8")
    except configparser.Error as e:
        raise ProfileError(f"Cannot parse {ini_path}: {e}") from e
    return parser


def _resolve_profile_dir(
    base_dir: Path, parser: configparser.ConfigParser, section: str
) -> Optional[Path]:
    path = parser.get(section, "Path", fallback=None)
    if not path:
        return None
    is_relative = parser.get(section, "IsRelative", fallback="1") == "1"
    return base_dir / path if is_relative else Path(path)


def find_default_profile(base_dir: Path) -> Path:
    """
    Return the default profile directory under a browser base directory.

    The section flagged ``Default=1`` is preferred; otherwise the first
    profile whose directory exists is used.

    Args:
        base_dir (Path): Directory containing profiles.ini

    Returns:
        Path: The profile directory

    Raises:
        ProfileError: If no usable profile exists
    """
    base_dir = Path(base_dir)
    parser = read_profiles_ini(base_dir)

    sections = [s for s in parser.sections() if s.lower().startswith("profile")]
    if not sections:
        raise ProfileError(f"No [Profile*] sections in {base_dir / PROFILES_INI}")

    sections.sort(key=lambda s: 0 if parser.get(s, "Default", fallback="0") == "1" else 1)

    for section in sections:
        profile_dir = _resolve_profile_dir(base_dir, parser, section)
        if profile_dir and profile_dir.is_dir():
            logger.debug(f"Using profile [{section}] at {profile_dir}")
            return profile_dir

    raise ProfileError(f"No usable profile directory under {base_dir}")


def discover_profile(home: Optional[Path] = None) -> Path:
    """
    Find the default profile of the first installed browser.

    Args:
        home (Path, optional): Home directory, defaults to the current user's

    Returns:
        Path: The profile directory

    Raises:
        ProfileError: If no browser base directory holds a usable profile
    """
    for base_dir in candidate_base_dirs(home):
        if not (base_dir / PROFILES_INI).is_file():
            continue
        try:
            return find_default_profile(base_dir)
        except ProfileError as e:
            logger.debug(f"Skipping {base_dir}: {e}")

    raise ProfileError("No browser profile found, pass --profile-dir explicitly")
