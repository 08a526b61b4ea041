"""
Lock Registry — in-memory owner of package records.

Keeps the "packages" section of the automation lock as PackageRecord objects
and converts it to and from the decoded lock data. Reading and writing the
lock file is left to the caller.
"""

import logging
from collections.abc import Iterator, Mapping

from package_lock.core.exceptions import UnexpectedValueError
from package_lock.models.package import PackageRecord

logger = logging.getLogger(__name__)


STRING_KEYS = ("pretty-name", "parent", "url", "operation", "type", "created")
MAPPING_KEYS = ("requires", "automatic-extra", "autoload")


class LockRegistry:
    """
    Collection of PackageRecord objects keyed by lower-cased package name.

    Not internally synchronized; give each registry a single owner.
    """

    def __init__(self):
        self._packages: dict[str, PackageRecord] = {}

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(self._packages.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def add(self, package: PackageRecord) -> "LockRegistry":
        """
        Store a record under its lower-cased name, replacing any previous one.

        The key is taken when the record is added; renaming it afterwards does
        not move it.
        """
        key = package.name.lower()
        if key in self._packages:
            logger.debug(f"Replacing {key} in lock registry")
        self._packages[key] = package
        return self

    def has(self, name: str) -> bool:
        return name.lower() in self._packages

    def get(self, name: str) -> PackageRecord | None:
        return self._packages.get(name.lower())

    def remove(self, name: str) -> None:
        if self._packages.pop(name.lower(), None) is not None:
            logger.debug(f"Removed {name.lower()} from lock registry")

    def reset(self) -> None:
        self._packages.clear()

    def names(self) -> list[str]:
        return list(self._packages)

    def dev_packages(self) -> list[PackageRecord]:
        return [package for package in self if package.is_dev]

    def packages_for_parent(self, parent: str) -> list[PackageRecord]:
        """Records that were pulled in by ``parent``."""
        return [package for package in self if package.parent_name == parent]

    def to_lock_data(self) -> dict[str, dict]:
        """Flatten every record into its lock entry."""
        return {name: package.to_dict() for name, package in self._packages.items()}

    @classmethod
    def from_lock_data(cls, data: object) -> "LockRegistry":
        """
        Build a registry from the decoded "packages" lock section.

        Args:
            data: Mapping of package name to lock entry.

        Returns:
            A registry holding one record per entry.

        Raises:
            UnexpectedValueError: If the section or an entry has the wrong shape,
                or two entries resolve to the same package name.
        """
        if not isinstance(data, Mapping):
            raise UnexpectedValueError(
                f"Lock packages section must be a mapping, got {type(data).__name__}."
            )

        registry = cls()
        loaded_from: dict[str, str] = {}
        for key, entry in data.items():
            _validate_entry(key, entry)
            name = entry.get("pretty-name") or key
            if registry.has(name):
                raise UnexpectedValueError(
                    f"Lock entries [{loaded_from[name.lower()]}] and [{key}] both resolve to package [{name}]."
                )
            loaded_from[name.lower()] = key
            registry.add(PackageRecord.create_from_lock(name, entry))

        logger.info(f"Loaded {len(registry)} packages from lock data")
        return registry


def _validate_entry(key: object, entry: object) -> None:
    """Check one lock entry before it reaches PackageRecord.create_from_lock."""
    if not isinstance(key, str) or not key:
        raise UnexpectedValueError(f"Lock package name must be a non-empty string, got {key!r}.")
    if not isinstance(entry, Mapping):
        raise UnexpectedValueError(
            f"Lock entry for [{key}] must be a mapping, got {type(entry).__name__}."
        )
    if "version" not in entry:
        raise UnexpectedValueError(f"Lock entry for [{key}] is missing the [version] key.")

    for field_name in ("version", *STRING_KEYS):
        value = entry.get(field_name)
        if value is not None and not isinstance(value, str):
            raise UnexpectedValueError(
                f"Lock entry for [{key}] has a non-string [{field_name}]: {value!r}."
            )

    is_dev = entry.get("is-dev")
    if is_dev is not None and not isinstance(is_dev, bool):
        raise UnexpectedValueError(f"Lock entry for [{key}] has a non-boolean [is-dev]: {is_dev!r}.")

    for field_name in MAPPING_KEYS:
        value = entry.get(field_name)
        if value is not None and not isinstance(value, Mapping):
            raise UnexpectedValueError(
                f"Lock entry for [{key}] has a non-mapping [{field_name}]: {value!r}."
            )
