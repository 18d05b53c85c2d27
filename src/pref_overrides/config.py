"""Default settings for pref-overrides."""

from pref_overrides import __version__

# Profile files
PREFS_FILENAME = "user.js"
PROFILES_INI = "profiles.ini"

# Written at the top of every prefs file saved by ProfilePrefsStore
PREFS_HEADER = """\
// Preference overrides managed by pref-overrides.
// The browser applies these values at every startup."""

# Browser base directories, relative to the user's home directory
BROWSER_BASE_DIRS = [
    # Firefox
    ".mozilla/firefox",
    "Library/Application Support/Firefox",
    "AppData/Roaming/Mozilla/Firefox",
    # LibreWolf (native and Flatpak)
    ".librewolf",
    ".var/app/io.gitlab.librewolf-community/.librewolf",
    # Floorp
    ".floorp",
]

# HTTP settings for remote override sources
DEFAULT_USER_AGENT = f"pref-overrides/{__version__}"
DEFAULT_TIMEOUT = 30
DEFAULT_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 0.5
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]
