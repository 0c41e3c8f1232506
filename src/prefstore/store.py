"""Settings store: save, load and delete against a resolved path."""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from .codec import CodecRegistry
from .codec import default_registry
from .exceptions import StoreFileError
from .exceptions import StoreFileNotFoundError
from .locations import DirectoryProvider
from .locations import resolve
from .locations import user_config_root
from .models import ExplicitDir
from .models import StoreDescriptor
from .utils import from_data
from .utils import to_data

logger = logging.getLogger(__name__)


class ConfigStore:
    """Saves, loads and deletes settings records.

    The store only holds its collaborators. Every operation takes a
    StoreDescriptor and resolves the path afresh, so nothing is cached
    between calls and one store can serve any number of descriptors.

    Args:
        directory_provider: Callable returning the platform config root (or None)
        registry: Codec registry (default: built-in JSON/YAML/TOML/INI/pickle)
    """

    def __init__(
        self,
        directory_provider: DirectoryProvider = user_config_root,
        registry: CodecRegistry | None = None,
    ):
        """Initialize settings store with injected collaborators.

        Args:
            directory_provider: Source of the platform config root
            registry: Codecs by format tag
        """
        self.directory_provider = directory_provider
        self.registry = registry if registry is not None else default_registry()

    def path(self, descriptor: StoreDescriptor) -> Path:
        """Get the settings file path for a descriptor.

        Raises:
            DirectoryUnavailableError: If the config root is needed but unavailable
        """
        path = resolve(descriptor, self.directory_provider)
        logger.debug(f"Resolved settings for '{descriptor.app}' to {path}")
        return path

    def exists(self, descriptor: StoreDescriptor) -> bool:
        """Check whether a settings file has been saved for a descriptor."""
        return self.path(descriptor).is_file()

    # ===== Operations =====

    def save(self, record: Any, descriptor: StoreDescriptor) -> None:
        """Save a settings record, replacing any existing file.

        Parent directories are created as needed. The record is encoded
        before anything is written, and the file is replaced atomically.
        A failure after directory creation leaves the directory in place.
        Overwrites keep the existing file's permissions; new files are
        created with owner-only (0600) permissions.

        Args:
            record: Mapping or dataclass instance
            descriptor: Target store

        Raises:
            DirectoryUnavailableError: If the config root is needed but unavailable
            UnsupportedFormatError: If no codec handles the format
            EncodingError: If the record cannot be represented in the format
            StoreFileError: If creating the directory or writing the file fails
        """
        path = self.path(descriptor)
        codec = self.registry.get(descriptor.format)
        payload = codec.encode(to_data(record), descriptor.format)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreFileError(f"Failed to create settings directory {path.parent}: {e}") from e

        self._write_atomic(path, payload)
        logger.info(f"Saved {descriptor.format.tag} settings for '{descriptor.app}' to {path}")

    def load(self, descriptor: StoreDescriptor, record_type: type = dict) -> Any:
        """Load a settings record.

        Args:
            descriptor: Source store
            record_type: dict or a dataclass type to build (default: dict)

        Returns:
            Instance of record_type

        Raises:
            DirectoryUnavailableError: If the config root is needed but unavailable
            StoreFileNotFoundError: If nothing has been saved at the resolved path
            StoreFileError: If the file cannot be read
            UnsupportedFormatError: If no codec handles the format
            DecodingError: If the content is malformed or does not fit record_type
        """
        path = self.path(descriptor)
        codec = self.registry.get(descriptor.format)

        try:
            raw = path.read_bytes()
        except FileNotFoundError as e:
            raise StoreFileNotFoundError(f"No settings file at {path}") from e
        except OSError as e:
            raise StoreFileError(f"Failed to read settings from {path}: {e}") from e

        return from_data(codec.decode(raw), record_type)

    def delete(self, descriptor: StoreDescriptor) -> None:
        """Delete a settings file.

        For every location except ExplicitDir the parent directory is then
        removed if it is empty. That cleanup is best effort: a non-empty
        directory or a permission error is expected and ignored. ExplicitDir
        directories belong to the caller and are never removed.

        Args:
            descriptor: Store to delete

        Raises:
            DirectoryUnavailableError: If the config root is needed but unavailable
            StoreFileNotFoundError: If there is no settings file to delete
            StoreFileError: If the file cannot be removed
        """
        path = self.path(descriptor)

        try:
            path.unlink()
        except FileNotFoundError as e:
            raise StoreFileNotFoundError(f"No settings file at {path}") from e
        except OSError as e:
            raise StoreFileError(f"Failed to delete settings file {path}: {e}") from e

        logger.info(f"Deleted settings for '{descriptor.app}' at {path}")

        if not isinstance(descriptor.location, ExplicitDir):
            self._remove_dir_if_empty(path.parent)

    # ===== Private Helpers =====

    def _write_atomic(self, path: Path, payload: bytes) -> None:
        """Write bytes to a temp file beside path, then rename over it.

        An existing file keeps its permission bits; a new file is created
        readable by its owner only.

        Raises:
            StoreFileError: If the write or rename fails
        """
        tmp_path = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            if path.exists():
                os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StoreFileError(f"Failed to write settings to {path}: {e}") from e

    def _remove_dir_if_empty(self, directory: Path) -> None:
        """Attempt to remove a directory, discarding any failure.

        Failure is the normal outcome when the directory still holds other
        files, so it is logged at debug level and not reported.
        """
        try:
            directory.rmdir()
        except OSError as e:
            logger.debug(f"Left settings directory {directory} in place: {e}")
        else:
            logger.debug(f"Removed empty settings directory {directory}")


_default_store: ConfigStore | None = None


def _store() -> ConfigStore:
    global _default_store
    if _default_store is None:
        _default_store = ConfigStore()
    return _default_store


def save_config(record: Any, descriptor: StoreDescriptor) -> None:
    """Save a settings record using the default store."""
    _store().save(record, descriptor)


def load_config(descriptor: StoreDescriptor, record_type: type = dict) -> Any:
    """Load a settings record using the default store."""
    return _store().load(descriptor, record_type)


def delete_config(descriptor: StoreDescriptor) -> None:
    """Delete a settings file using the default store."""
    _store().delete(descriptor)
