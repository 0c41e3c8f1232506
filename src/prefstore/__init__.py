"""prefstore: Cross-platform application settings persistence.

This library resolves where an application's settings file lives and saves,
loads and deletes it in one of several serialization formats:
- Location strategies: Auto, ExplicitPath, ExplicitFile, ExplicitDir
- Formats: JSON (compact or pretty), YAML, TOML, INI, pickle
- Records: plain mappings or dataclass instances

Applications describe which store they mean with a StoreDescriptor. The
library provides the mechanism for resolving the path and moving the record
to and from disk.

Public API:
    ConfigStore: Save/load/delete operations with injectable collaborators
    StoreDescriptor: Immutable (app, location, format) identity of a store
    Auto, ExplicitPath, ExplicitFile, ExplicitDir: Location strategies
    Format, JSON, YAML, TOML, INI, PICKLE: Serialization formats
    Codec, CodecRegistry, default_registry: Format extension points
    resolve, user_config_root: Path resolution
    save_config, load_config, delete_config: Shortcuts using a default store
    StoreError and subclasses: Exception types

Example:
    ```python
    from dataclasses import dataclass, field
    from prefstore import JSON, Auto, StoreDescriptor, delete_config, load_config, save_config

    @dataclass
    class MyConfig:
        window_width: int = 800
        window_height: int = 600
        theme: str = "dark"
        user_data: dict[str, str] = field(default_factory=dict)

    store = StoreDescriptor(app="MyApp", location=Auto(), format=JSON)

    # Written to e.g. ~/.config/MyApp/config.json
    save_config(MyConfig(), store)
    config = load_config(store, MyConfig)

    # Removes the file, and MyApp/ if it is now empty
    delete_config(store)
    ```
"""

from .codec import Codec
from .codec import CodecRegistry
from .codec import default_registry
from .exceptions import DecodingError
from .exceptions import DirectoryUnavailableError
from .exceptions import EncodingError
from .exceptions import StoreError
from .exceptions import StoreFileError
from .exceptions import StoreFileNotFoundError
from .exceptions import UnsupportedFormatError
from .locations import resolve
from .locations import user_config_root
from .models import INI
from .models import JSON
from .models import PICKLE
from .models import TOML
from .models import YAML
from .models import Auto
from .models import ExplicitDir
from .models import ExplicitFile
from .models import ExplicitPath
from .models import Format
from .models import Location
from .models import StoreDescriptor
from .store import ConfigStore
from .store import delete_config
from .store import load_config
from .store import save_config

__version__ = "0.1.0"

__all__ = [
    "ConfigStore",
    "StoreDescriptor",
    "Location",
    "Auto",
    "ExplicitPath",
    "ExplicitFile",
    "ExplicitDir",
    "Format",
    "JSON",
    "YAML",
    "TOML",
    "INI",
    "PICKLE",
    "Codec",
    "CodecRegistry",
    "default_registry",
    "resolve",
    "user_config_root",
    "save_config",
    "load_config",
    "delete_config",
    "StoreError",
    "DirectoryUnavailableError",
    "StoreFileError",
    "StoreFileNotFoundError",
    "EncodingError",
    "DecodingError",
    "UnsupportedFormatError",
]
