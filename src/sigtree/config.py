"""Configuration loading for directory scans.

A scan root may carry a ``.code-structure.json`` file that extends the built-in
exclusion rules and replaces the set of extensions whose files get their
signatures extracted. The file is optional; when it is missing the defaults are
used silently, and when it is unreadable or malformed the defaults are used and a
:class:`~sigtree.exceptions.ConfigWarning` is issued.
"""

import json
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from sigtree.exceptions import ConfigFormatError, ConfigWarning
from sigtree.types import PathType

CONFIG_FILE_NAME = ".code-structure.json"

DEFAULT_EXCLUDE_PATHS: Tuple[str, ...] = ("node_modules",)
DEFAULT_EXCLUDE_FILES: Tuple[str, ...] = ("package-lock.json",)
DEFAULT_INCLUDE_EXTENSIONS: Tuple[str, ...] = (".js", ".mjs", ".cjs", ".json")

# Extensions that are listed but never parsed for signatures
DATA_EXTENSIONS: Tuple[str, ...] = (".json",)


@dataclass(frozen=True)
class Config:
    """Resolved exclusion and inclusion rules for one scan.

    Attributes:
        exclude_paths: Path fragments matched against whole path segments.
        exclude_files: File base names that are never listed.
        include_extensions: Extensions of files whose signatures are extracted.

    Example:
        >>> config = default_config()
        >>> config.exclude_paths
        ('node_modules',)
        >>> config.wants_signatures("src/index.js")
        True
        >>> config.wants_signatures("package.json")
        False
    """

    exclude_paths: Tuple[str, ...] = DEFAULT_EXCLUDE_PATHS
    exclude_files: Tuple[str, ...] = DEFAULT_EXCLUDE_FILES
    include_extensions: Tuple[str, ...] = DEFAULT_INCLUDE_EXTENSIONS

    def wants_signatures(self, path: PathType) -> bool:
        """Check whether signatures should be extracted from a file.

        Args:
            path: File path; only its extension is inspected.

        Returns:
            True if the extension is included and is not a data-interchange format.
        """
        suffix = Path(path).suffix
        return suffix in self.include_extensions and suffix not in DATA_EXTENSIONS


def default_config() -> Config:
    """Return the built-in configuration."""
    return Config()


def _string_list(data: Mapping[str, Any], key: str) -> Optional[Tuple[str, ...]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigFormatError(f"'{key}' must be a list of strings")
    return tuple(value)


def parse_config(data: Any) -> Config:
    """Merge a decoded configuration object onto the defaults.

    Exclusion lists are additive: entries from ``excludePaths`` and the legacy
    ``excludeDirs`` alias are appended to the default excluded paths, and entries
    from ``excludeFiles`` to the default excluded files. ``includeExtensions``
    replaces the default extensions when present. Unknown keys are ignored and
    duplicates are kept.

    Args:
        data: Value decoded from the configuration file's JSON.

    Returns:
        The merged configuration.

    Raises:
        ConfigFormatError: If data is not an object or a recognized field is not a
            list of strings.

    Example:
        >>> config = parse_config({"excludePaths": ["dist"], "excludeDirs": ["build"]})
        >>> config.exclude_paths
        ('node_modules', 'dist', 'build')
        >>> parse_config({"includeExtensions": [".ts"]}).include_extensions
        ('.ts',)
    """
    if not isinstance(data, dict):
        raise ConfigFormatError(f"expected a JSON object, got {type(data).__name__}")

    exclude_paths = _string_list(data, "excludePaths") or ()
    exclude_dirs = _string_list(data, "excludeDirs") or ()
    exclude_files = _string_list(data, "excludeFiles") or ()
    include_extensions = _string_list(data, "includeExtensions")

    return Config(
        exclude_paths=DEFAULT_EXCLUDE_PATHS + exclude_paths + exclude_dirs,
        exclude_files=DEFAULT_EXCLUDE_FILES + exclude_files,
        include_extensions=DEFAULT_INCLUDE_EXTENSIONS if include_extensions is None else include_extensions,
    )


def load_config(scan_directory: PathType) -> Config:
    """Load the configuration file found at a scan root.

    This function never raises. A missing file yields the defaults; a file that
    cannot be read, is not valid JSON, or has the wrong shape yields the defaults
    and issues a :class:`ConfigWarning`.

    Args:
        scan_directory: Root directory of the scan.

    Returns:
        The resolved configuration.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     load_config(tmpdir) == default_config()
        True
    """
    config_path = Path(scan_directory) / CONFIG_FILE_NAME
    if not config_path.is_file():
        return default_config()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
        return parse_config(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ConfigFormatError) as e:
        warnings.warn(ConfigWarning(str(config_path), str(e)), stacklevel=2)

    return default_config()
