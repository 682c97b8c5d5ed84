"""File identifier for uniquely identifying directories by device and inode."""

from pathlib import Path
from typing import Any, Optional


class FileIdentifier:
    """Class for uniquely identifying files and directories by their device and inode.

    Directory symlinks are followed during traversal; the identifiers of the
    directories on the current branch are tracked so that a symlink pointing back at
    an ancestor is listed without being expanded again.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def for_path(cls, path: Path) -> Optional["FileIdentifier"]:
        """Get the identifier of a path, following symlinks.

        Returns:
            The identifier, or None if the path cannot be stat'ed.
        """
        try:
            stat_info = path.stat()
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
