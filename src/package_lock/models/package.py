"""
Package Record Model — one package's entry in the automation lock.

Holds the metadata the automation tool keeps about an installed package and
maps it to and from the flat representation stored in the lock document.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any


LOCK_KEYS = (
    "pretty-name",
    "version",
    "parent",
    "is-dev",
    "url",
    "operation",
    "type",
    "requires",
    "automatic-extra",
    "autoload",
    "created",
)


def _now_rfc3339() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")


class PackageRecord:
    """
    Metadata record for a single package.

    A plain data holder: setters store values as given and return the same
    instance so calls can be chained. ``name`` is the lower-cased identifier,
    ``pretty_name`` keeps the original spelling and never changes.
    """

    def __init__(self, name: str, pretty_version: str | None):
        self._pretty_name = name
        self._name = name.lower()
        self._pretty_version = pretty_version
        self._parent_name: str | None = None
        self._type: str | None = None
        self._url: str | None = None
        self._operation: str | None = None
        self._requires: dict = {}
        self._configs: dict = {}
        self._autoload: dict = {}
        self._is_dev = False
        self._created = _now_rfc3339()

    def __repr__(self) -> str:
        return f"PackageRecord({self._pretty_name!r}, {self._pretty_version!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageRecord):
            return NotImplemented
        return self._name == other._name and self.to_dict() == other.to_dict()

    __hash__ = None

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> PackageRecord:
        self._name = name
        return self

    @property
    def pretty_name(self) -> str:
        return self._pretty_name

    @property
    def parent_name(self) -> str | None:
        return self._parent_name

    def set_parent_name(self, name: str) -> PackageRecord:
        self._parent_name = name
        return self

    @property
    def pretty_version(self) -> str | None:
        return self._pretty_version

    @property
    def type(self) -> str | None:
        return self._type

    def set_type(self, type_: str) -> PackageRecord:
        self._type = type_
        return self

    @property
    def url(self) -> str | None:
        return self._url

    def set_url(self, url: str) -> PackageRecord:
        self._url = url
        return self

    @property
    def operation(self) -> str | None:
        """Last lifecycle operation applied (install, update, uninstall, ...)."""
        return self._operation

    def set_operation(self, operation: str) -> PackageRecord:
        self._operation = operation
        return self

    @property
    def requires(self) -> dict:
        return self._requires

    def set_requires(self, requires: dict) -> PackageRecord:
        self._requires = requires
        return self

    @property
    def configs(self) -> dict:
        return self._configs

    def set_config(self, configs: dict) -> PackageRecord:
        """Replace the whole plugin configuration block."""
        self._configs = configs
        return self

    @property
    def autoload(self) -> dict:
        return self._autoload

    def set_autoload(self, autoload: dict) -> PackageRecord:
        self._autoload = autoload
        return self

    @property
    def is_dev(self) -> bool:
        return self._is_dev

    def set_is_dev(self, value: bool = True) -> PackageRecord:
        self._is_dev = value
        return self

    @property
    def time(self) -> str:
        """Creation timestamp, RFC3339."""
        return self._created

    def set_time(self, time: str) -> PackageRecord:
        self._created = time
        return self

    def has_config(self, main_key: str, name: str | None = None) -> bool:
        """
        Check for a plugin configuration block or one key inside it.

        Args:
            main_key: Top-level key in the configuration block.
            name: Optional key inside ``configs[main_key]``.

        Returns:
            False when any level is missing or ``configs[main_key]`` is not a
            mapping while ``name`` is given.
        """
        if main_key not in self._configs:
            return False
        if name is None:
            return True

        block = self._configs[main_key]
        return isinstance(block, Mapping) and name in block

    def get_config(self, main_key: str, name: str | None = None) -> Any:
        """Return the block (or the nested value when ``name`` is given), else None."""
        if main_key not in self._configs:
            return None

        block = self._configs[main_key]
        if name is None:
            return block
        if isinstance(block, Mapping) and name in block:
            return block[name]
        return None

    @classmethod
    def create_from_lock(cls, name: str, data: Mapping[str, Any]) -> PackageRecord:
        """
        Rebuild a record from its lock entry.

        Recognised keys are applied through their setter; ``None`` values keep
        the constructor default and unknown keys are ignored.
        """
        package = cls(name, data.get("version"))

        for key, value in data.items():
            if value is None:
                continue

            match key:
                case "parent":
                    package.set_parent_name(value)
                case "is-dev":
                    package.set_is_dev(value)
                case "url":
                    package.set_url(value)
                case "operation":
                    package.set_operation(value)
                case "type":
                    package.set_type(value)
                case "requires":
                    package.set_requires(value)
                case "automatic-extra":
                    package.set_config(value)
                case "autoload":
                    package.set_autoload(value)
                case "created":
                    package.set_time(value)

        return package

    def to_dict(self) -> dict:
        """Flatten to the lock entry layout (``name`` is derived, not stored)."""
        return {
            "pretty-name": self._pretty_name,
            "version": self._pretty_version,
            "parent": self._parent_name,
            "is-dev": self._is_dev,
            "url": self._url,
            "operation": self._operation,
            "type": self._type,
            "requires": self._requires,
            "automatic-extra": self._configs,
            "autoload": self._autoload,
            "created": self._created,
        }
