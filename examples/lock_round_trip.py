"""
Example: Rebuild lock records from decoded lock data and print a summary.

Usage:
    python examples/lock_round_trip.py
"""

import logging

from package_lock import LockRegistry
from package_lock.core.summary import print_summary


LOCK_PACKAGES = {
    "vendor/framework": {
        "pretty-name": "Vendor/Framework",
        "version": "5.0.0",
        "type": "library",
        "operation": "install",
        "requires": {"php": "^7.2"},
        "automatic-extra": {"providers": {"cache": "Vendor\\Framework\\CacheProvider"}},
        "created": "2020-01-02T03:04:05+00:00",
    },
    "vendor/tooling": {
        "version": "2.1.0",
        "is-dev": True,
        "operation": "update",
    },
    "vendor/bridge": {
        "version": "1.0.0",
        "parent": "vendor/framework",
        "is-dev": None,
    },
}


def main():
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    registry = LockRegistry.from_lock_data(LOCK_PACKAGES)
    print_summary(registry)

    framework = registry.get("vendor/framework")
    print(f"\ncache provider: {framework.get_config('providers', 'cache')}")


if __name__ == "__main__":
    main()
