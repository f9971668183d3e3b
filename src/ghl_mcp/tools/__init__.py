"""Loads every GoHighLevel tool area in catalog order."""

from __future__ import annotations

import importlib
import logging
from typing import NamedTuple

from ..client import GHLClient
from .base import ToolModule

log = logging.getLogger("ghl_mcp")

# Catalog order: tools/list concatenates areas in exactly this order.
AREAS: tuple[str, ...] = (
    "contacts",
    "conversations",
    "blogs",
    "opportunities",
    "calendars",
    "email",
    "locations",
    "email_isv",
    "social_media",
    "media",
    "objects",
    "associations",
    "custom_fields_v2",
    "workflows",
    "surveys",
    "store",
    "products",
    "payments",
    "invoices",
)


class UnavailableModule(NamedTuple):
    """A tool area that could not be loaded; none of its tools are served."""

    area: str
    reason: str


def load_modules(
    client: GHLClient, areas: tuple[str, ...] = AREAS
) -> tuple[list[ToolModule], list[UnavailableModule]]:
    modules: list[ToolModule] = []
    unavailable: list[UnavailableModule] = []
    for area in areas:
        try:
            mod = importlib.import_module(f"{__name__}.{area}")
            operations = mod.OPERATIONS
        except (ImportError, AttributeError) as exc:
            log.warning("Tool area %s is unavailable: %s", area, exc)
            unavailable.append(UnavailableModule(area, str(exc)))
            continue
        modules.append(ToolModule(area, operations, client))
    return modules, unavailable
