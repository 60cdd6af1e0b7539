"""
Enum Context — The setup-time owner of a registry, resolver and binder.

Model classes choose the context they declare into. Contexts never share
bindings with each other.
"""

from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from enum_overlay.binder import AttributeBinder
from enum_overlay.registry import EnumRegistry
from enum_overlay.resolver import EnumResolver, create_resolver


@dataclass
class EnumContext:
    """Registry, resolver and binder wired to share one registry."""
    registry: EnumRegistry = field(default_factory=EnumRegistry)
    resolver: EnumResolver = field(default_factory=EnumResolver)
    binder: AttributeBinder = field(init=False)
    
    def __post_init__(self) -> None:
        self.binder = AttributeBinder(registry=self.registry, resolver=self.resolver)
    
    def register_enum(self, table: Any = None, *, name: str | None = None) -> Any:
        """Add a table to the resolver catalog (decorator or call)."""
        return self.resolver.register(table, name=name)


def create_context(
    tables: dict[str, Any] | None = None,
    modules: list[str | ModuleType] | None = None,
) -> EnumContext:
    """Factory for a fresh context."""
    return EnumContext(resolver=create_resolver(tables=tables, modules=modules))


_default_context = EnumContext()


def default_context() -> EnumContext:
    """Context used by models that do not set their own."""
    return _default_context


def reset_default_context() -> EnumContext:
    """Replace the default context with an empty one."""
    global _default_context
    _default_context = EnumContext()
    return _default_context
