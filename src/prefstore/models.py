"""Data models for prefstore."""

from dataclasses import dataclass
from pathlib import Path


class Location:
    """Strategy for deriving (or accepting) the settings file path.

    Use one of the concrete variants: Auto, ExplicitPath, ExplicitFile
    or ExplicitDir.
    """


@dataclass(frozen=True)
class Auto(Location):
    """Platform config directory + app name + the format's default file name."""


@dataclass(frozen=True)
class ExplicitPath(Location):
    """Full path to the settings file, used verbatim.

    Attributes:
        path: Settings file path (app name and format are ignored)
    """

    path: str | Path


@dataclass(frozen=True)
class ExplicitFile(Location):
    """Platform config directory + app name, with a caller-chosen file name.

    Attributes:
        filename: File name placed inside the app's config directory
    """

    filename: str


@dataclass(frozen=True)
class ExplicitDir(Location):
    """Caller-owned directory + the format's default file name.

    The directory belongs to the caller and is never removed on delete.

    Attributes:
        directory: Directory that holds the settings file
    """

    directory: str | Path


@dataclass(frozen=True)
class Format:
    """Serialization format for a settings file.

    Attributes:
        tag: Format identifier, used to pick a codec and the default file name
        indent: Pretty-printing indent (spaces or a literal string such as a tab);
            None means compact output. Only honored by codecs that support it.
    """

    tag: str
    indent: int | str | None = None

    def default_name(self) -> str:
        """Return the default settings file name for this format.

        Sub-options such as indent do not affect the name.

        Examples:
            >>> Format("JSON").default_name()
            'config.json'
            >>> Format.pretty_json(4).default_name()
            'config.json'
        """
        return f"config.{self.tag}".lower()

    @classmethod
    def pretty_json(cls, indent: int | str = "\t") -> "Format":
        """Build a pretty-printed JSON format (tab indent by default)."""
        return cls("json", indent=indent)


JSON = Format("json")
YAML = Format("yaml")
TOML = Format("toml")
INI = Format("ini")
PICKLE = Format("pickle")


@dataclass(frozen=True)
class StoreDescriptor:
    """Identity of one settings store.

    Immutable; callers build it once and pass it to every operation.

    Attributes:
        app: Application name, used as the directory under the platform config root
        location: Location strategy for the settings file
        format: Serialization format
    """

    app: str
    location: Location
    format: Format = JSON
