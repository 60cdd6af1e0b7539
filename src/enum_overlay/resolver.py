"""
Enum Resolver — Finds the enum type for an attribute by naming convention.

Used only when a declaration does not name its enum type. Candidates come
from an explicit catalog filled at setup time, then from a list of search
modules. A candidate found nowhere is an EnumNotFoundError; anything else
that goes wrong while loading is raised as is.
"""

from dataclasses import dataclass, field
from importlib import import_module
from types import ModuleType
from typing import Any

from enum_overlay.errors import EnumNotFoundError
from enum_overlay.naming import classify
from enum_overlay.observability.logging import get_logger

logger = get_logger("resolver")


@dataclass
class EnumResolver:
    """
    Resolves attribute names to enum types.
    
    Catalog values are either tables or "module:attr" import paths loaded
    on first resolution.
    """
    modules: list[str | ModuleType] = field(default_factory=list)
    _catalog: dict[str, Any] = field(default_factory=dict)
    _paths: dict[str, str] = field(default_factory=dict)
    
    def register(self, table: Any = None, *, name: str | None = None) -> Any:
        """
        Add a table to the catalog.
        
        Works as a plain call or as a class decorator:
        
            @resolver.register
            class Sex(...): ...
        """
        def add(obj: Any) -> Any:
            key = name or getattr(obj, "__name__", None)
            if not key:
                raise ValueError(f"Cannot infer catalog name for {obj!r}; pass name=")
            self._catalog[key] = obj
            self._paths.pop(key, None)
            return obj
        
        if table is None:
            return add
        return add(table)
    
    def register_path(self, name: str, path: str) -> None:
        """Add a lazily imported table, given as "package.module:Attr"."""
        if ":" not in path:
            raise ValueError(f"Import path must look like 'module:attr', got {path!r}")
        self._paths[name] = path
        self._catalog.pop(name, None)
    
    def names(self) -> list[str]:
        """All catalog names, loaded or not."""
        return sorted({*self._catalog, *self._paths})
    
    def resolve(self, owner: type, attribute: str) -> Any:
        """
        Find the enum type for owner.attribute.
        
        Raises:
            EnumNotFoundError: No table carries the conventional name
        """
        candidate = classify(attribute)
        
        if candidate in self._catalog:
            return self._catalog[candidate]
        
        if candidate in self._paths:
            path = self._paths[candidate]
            table = _load_path(path)
            self._catalog[candidate] = table
            del self._paths[candidate]
            logger.debug(f"Loaded {candidate} from {path}")
            return table
        
        for module in self.modules:
            found = _find_in_module(module, candidate)
            if found is not None:
                return found
        
        logger.debug(f"No enum named {candidate} for {owner.__qualname__}.{attribute}")
        raise EnumNotFoundError(attribute, owner.__name__, candidate=candidate)


def _load_path(path: str) -> Any:
    module_name, _, attr_path = path.partition(":")
    obj: Any = import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj


_MISSING = object()


def _find_in_module(module: str | ModuleType, name: str) -> Any | None:
    if isinstance(module, str):
        module = import_module(module)
    found = getattr(module, name, _MISSING)
    return None if found is _MISSING else found


def create_resolver(
    tables: dict[str, Any] | None = None,
    modules: list[str | ModuleType] | None = None,
) -> EnumResolver:
    """Factory for resolver with an initial catalog."""
    resolver = EnumResolver(modules=list(modules or []))
    for name, table in (tables or {}).items():
        resolver.register(table, name=name)
    return resolver
