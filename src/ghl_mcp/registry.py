from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .client import GHLClient
from .tools import UnavailableModule, load_modules
from .tools.base import ToolModule

log = logging.getLogger("ghl_mcp")


class ToolNotFoundError(LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolRegistry:
    """Single name -> (descriptor, module) table built once at startup.

    Descriptors and routing come from the same ``OPERATIONS`` tables, so a
    listed tool is always callable and a callable tool is always listed.
    """

    def __init__(
        self,
        modules: Sequence[ToolModule],
        unavailable: Sequence[UnavailableModule] = (),
    ) -> None:
        self.modules = list(modules)
        self.unavailable = list(unavailable)
        self._entries: dict[str, tuple[dict[str, Any], ToolModule]] = {}
        for module in self.modules:
            for descriptor in module.descriptors():
                name = descriptor["name"]
                if name in self._entries:
                    owner = self._entries[name][1].area
                    raise ValueError(f"Duplicate tool name {name!r} in {module.area} (already in {owner})")
                self._entries[name] = (descriptor, module)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def list_tools(self) -> list[dict[str, Any]]:
        return [descriptor for descriptor, _ in self._entries.values()]

    def names(self) -> list[str]:
        return list(self._entries)

    def resolve(self, name: str) -> ToolModule:
        try:
            return self._entries[name][1]
        except KeyError:
            raise ToolNotFoundError(name) from None

    async def invoke(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        module = self.resolve(name)
        log.info("Executing tool %s (%s)", name, module.area)
        return await module.execute(name, arguments or {})

    def counts(self) -> dict[str, int]:
        counts = {module.area: len(module.operations) for module in self.modules}
        counts["total"] = len(self._entries)
        return counts


def build_registry(client: GHLClient) -> ToolRegistry:
    modules, unavailable = load_modules(client)
    registry = ToolRegistry(modules, unavailable)
    log.info("Registered %d tools across %d areas", len(registry), len(registry.modules))
    return registry
