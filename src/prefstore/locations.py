"""Settings file location resolution."""

import logging
from collections.abc import Callable
from pathlib import Path

from platformdirs import user_config_path

from .exceptions import DirectoryUnavailableError
from .models import Auto
from .models import ExplicitDir
from .models import ExplicitFile
from .models import ExplicitPath
from .models import StoreDescriptor

logger = logging.getLogger(__name__)

DirectoryProvider = Callable[[], Path | None]


def user_config_root() -> Path | None:
    """Get the platform's per-user configuration root.

    Typically %APPDATA% on Windows, ~/Library/Application Support on macOS
    and $XDG_CONFIG_HOME (or ~/.config) elsewhere.

    Returns:
        Absolute path, or None when the platform cannot supply one
        (for example when the home directory cannot be determined)
    """
    try:
        root = user_config_path()
    except (KeyError, RuntimeError) as e:
        logger.debug(f"No user config directory available: {e}")
        return None

    if not root.is_absolute():
        return None
    return root


def resolve(descriptor: StoreDescriptor, directory_provider: DirectoryProvider = user_config_root) -> Path:
    """Resolve the settings file path for a descriptor.

    Resolution table:
    - Auto:          <config root>/<app>/<format default name>
    - ExplicitPath:  path, verbatim
    - ExplicitDir:   <directory>/<format default name>
    - ExplicitFile:  <config root>/<app>/<filename>

    Pure path composition: nothing is normalized and the filesystem is
    never touched. The directory provider is only consulted for Auto and
    ExplicitFile.

    Args:
        descriptor: Store to resolve
        directory_provider: Callable returning the config root (or None)

    Returns:
        Path to the settings file

    Raises:
        DirectoryUnavailableError: If the config root is needed but unavailable
    """
    location = descriptor.location

    if isinstance(location, ExplicitPath):
        return Path(location.path)

    if isinstance(location, ExplicitDir):
        return Path(location.directory) / descriptor.format.default_name()

    if isinstance(location, Auto):
        filename = descriptor.format.default_name()
    elif isinstance(location, ExplicitFile):
        filename = location.filename
    else:
        raise TypeError(f"Unknown location strategy: {location!r}")

    root = directory_provider()
    if root is None:
        raise DirectoryUnavailableError("No system config directory detected")

    return Path(root) / descriptor.app / filename
