"""Codecs that turn plain settings data into bytes and back.

A codec works on plain data only (dicts, lists and scalars). Conversion
between user records and plain data lives in utils.
"""

import configparser
import io
import json
import pickle
import tomllib
from abc import ABC
from abc import abstractmethod
from typing import Any

import tomli_w
import yaml

from .exceptions import DecodingError
from .exceptions import EncodingError
from .exceptions import UnsupportedFormatError
from .models import Format


class Codec(ABC):
    """Encode/decode pair implementing one format."""

    @abstractmethod
    def encode(self, data: Any, fmt: Format) -> bytes:
        """Serialize plain data.

        Args:
            data: Plain settings data
            fmt: Active format (carries sub-options such as indent)

        Returns:
            Encoded bytes

        Raises:
            EncodingError: If the data cannot be represented in this format
        """

    @abstractmethod
    def decode(self, raw: bytes) -> Any:
        """Deserialize bytes into plain data.

        Raises:
            DecodingError: If the content is malformed
        """


class JsonCodec(Codec):
    def encode(self, data: Any, fmt: Format) -> bytes:
        try:
            if fmt.indent is None:
                text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
            else:
                text = json.dumps(data, ensure_ascii=False, indent=fmt.indent)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Cannot encode as JSON: {e}") from e
        return text.encode("utf-8")

    def decode(self, raw: bytes) -> Any:
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodingError(f"Invalid JSON: {e}") from e


class YamlCodec(Codec):
    def encode(self, data: Any, fmt: Format) -> bytes:
        try:
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as e:
            raise EncodingError(f"Cannot encode as YAML: {e}") from e
        return text.encode("utf-8")

    def decode(self, raw: bytes) -> Any:
        try:
            data = yaml.safe_load(raw.decode("utf-8"))
        except (UnicodeDecodeError, yaml.YAMLError) as e:
            raise DecodingError(f"Invalid YAML: {e}") from e
        return data if data is not None else {}


class TomlCodec(Codec):
    def encode(self, data: Any, fmt: Format) -> bytes:
        if not isinstance(data, dict):
            raise EncodingError("TOML documents must be a table at the top level")
        try:
            return tomli_w.dumps(data).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Cannot encode as TOML: {e}") from e

    def decode(self, raw: bytes) -> Any:
        try:
            return tomllib.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise DecodingError(f"Invalid TOML: {e}") from e


class IniCodec(Codec):
    """INI files via configparser.

    Top-level scalars live in [DEFAULT]; nested mappings become sections.
    Values come back as strings. A section key that repeats a top-level key
    is read back as the top-level value only.
    """

    @staticmethod
    def _parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        return parser

    @staticmethod
    def _scalar(key: str, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, int, float)):
            return str(value)
        raise EncodingError(f"INI cannot represent {type(value).__name__} value for '{key}'")

    def encode(self, data: Any, fmt: Format) -> bytes:
        if not isinstance(data, dict):
            raise EncodingError("INI documents must be a mapping at the top level")

        parser = self._parser()
        try:
            for key, value in data.items():
                if isinstance(value, dict):
                    parser.add_section(str(key))
                    for sub_key, sub_value in value.items():
                        parser.set(str(key), str(sub_key), self._scalar(f"{key}.{sub_key}", sub_value))
                else:
                    parser[parser.default_section][str(key)] = self._scalar(str(key), value)
        except (ValueError, configparser.Error) as e:
            raise EncodingError(f"Cannot encode as INI: {e}") from e

        buf = io.StringIO()
        parser.write(buf)
        return buf.getvalue().encode("utf-8")

    def decode(self, raw: bytes) -> Any:
        parser = self._parser()
        try:
            parser.read_string(raw.decode("utf-8"))
        except (UnicodeDecodeError, configparser.Error) as e:
            raise DecodingError(f"Invalid INI: {e}") from e

        defaults = dict(parser.defaults())
        result: dict[str, Any] = dict(defaults)
        for section in parser.sections():
            result[section] = {
                key: value for key, value in parser.items(section, raw=True) if key not in defaults
            }
        return result


class PickleCodec(Codec):
    def encode(self, data: Any, fmt: Format) -> bytes:
        try:
            return pickle.dumps(data)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise EncodingError(f"Cannot pickle settings: {e}") from e

    def decode(self, raw: bytes) -> Any:
        try:
            return pickle.loads(raw)
        except Exception as e:
            # Unpickling can raise nearly anything on corrupt input
            raise DecodingError(f"Invalid pickle data: {e}") from e


class CodecRegistry:
    """Maps format tags to codecs.

    New formats are supported by registering a codec under a new tag; path
    resolution does not change.
    """

    def __init__(self):
        self._codecs: dict[str, Codec] = {}

    def register(self, tag: str, codec: Codec) -> None:
        """Register (or replace) the codec for a format tag.

        Args:
            tag: Format tag (case-insensitive)
            codec: Codec implementation
        """
        self._codecs[tag.lower()] = codec

    def get(self, fmt: Format) -> Codec:
        """Get the codec for a format.

        Raises:
            UnsupportedFormatError: If no codec is registered for the format tag
        """
        try:
            return self._codecs[fmt.tag.lower()]
        except KeyError:
            raise UnsupportedFormatError(f"No codec registered for format '{fmt.tag}'") from None

    def tags(self) -> list[str]:
        """Get registered format tags."""
        return sorted(self._codecs)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.lower() in self._codecs


def default_registry() -> CodecRegistry:
    """Create a registry holding the built-in codecs."""
    registry = CodecRegistry()
    registry.register("json", JsonCodec())
    registry.register("yaml", YamlCodec())
    registry.register("toml", TomlCodec())
    registry.register("ini", IniCodec())
    registry.register("pickle", PickleCodec())
    return registry
