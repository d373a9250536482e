"""Deterministic naming of JDBC driver artifacts.

The driver name doubles as the de-duplication key for downloaded driver
jars, so two tables pointing at the same artifact must get the same name
and different artifacts must never share one.
"""

from __future__ import annotations

import hashlib
import logging

logger = logging.getLogger(__name__)

DRIVER_NAME_PREFIX = "jdbc_"


def build_driver_name(driver_url: str, checksum: str, driver_class: str) -> str:
    """
    Return `jdbc_<sha256 hex>` for a driver artifact.

    Each field is hashed as `<byte length>:<utf-8 bytes>` in the fixed order
    driver_url, checksum, driver_class, so field boundaries are unambiguous.
    """
    digest = hashlib.sha256()
    for value in (driver_url, checksum, driver_class):
        raw = value.encode("utf-8")
        digest.update(f"{len(raw)}:".encode("ascii"))
        digest.update(raw)

    name = f"{DRIVER_NAME_PREFIX}{digest.hexdigest()}"
    logger.debug("Driver name for %s (%s): %s", driver_url, driver_class, name)
    return name
