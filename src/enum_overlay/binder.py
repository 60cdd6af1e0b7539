"""
Attribute Binder — Declares attributes enumerated.

A declaration resolves the enum type (explicit or by naming convention),
records the binding, then installs the overlay on top of the attribute's
current accessors. Everything happens eagerly, so a missing enum fails
model setup rather than the first access.
"""

from dataclasses import dataclass, field
from typing import Any

from enum_overlay.errors import NotBoundError
from enum_overlay.observability.logging import ModelScope, get_logger
from enum_overlay.overlay import EnumOverlay, capture_accessors
from enum_overlay.registry import EnumRegistry
from enum_overlay.resolver import EnumResolver

logger = get_logger("binder")


@dataclass
class AttributeBinder:
    """
    Binds attributes to enum types and owns their overlays.
    
    Holds the same registry the overlays read from.
    """
    registry: EnumRegistry
    resolver: EnumResolver
    _overlays: dict[tuple[type, str], EnumOverlay] = field(default_factory=dict)
    
    def enumerate(
        self,
        owner: type,
        attribute: str,
        enum_type: Any = None,
    ) -> EnumOverlay:
        """
        Declare owner.attribute enumerated.
        
        Args:
            owner: Model class owning the attribute
            attribute: Attribute name
            enum_type: Lookup table; resolved by naming convention if omitted
        
        Returns:
            The installed overlay
        
        Raises:
            EnumNotFoundError: No enum_type given and none found by name
        """
        with ModelScope(owner):
            if enum_type is None:
                enum_type = self.resolver.resolve(owner, attribute)
            
            self.registry.register(owner, attribute, enum_type)
            overlay = self._install(owner, attribute)
            
            type_name = getattr(enum_type, "__name__", repr(enum_type))
            custom = sorted(kind.value for kind in overlay.original.custom)
            extra = {"extra_data": {
                "attribute": attribute,
                "enum_type": type_name,
                "custom_accessors": custom,
            }}
            if custom:
                logger.debug(
                    f"Enumerated {attribute} with {type_name}, wrapping custom {', '.join(custom)}",
                    extra=extra,
                )
            else:
                logger.debug(f"Enumerated {attribute} with {type_name}", extra=extra)
            return overlay
    
    def enum_type_for(self, owner: type, attribute: str) -> Any | None:
        """Enum type bound to owner.attribute, or None if not bound."""
        return self.registry.lookup(owner, attribute)
    
    def overlay_for(self, owner: type, attribute: str) -> EnumOverlay:
        """
        Nearest overlay for owner.attribute.
        
        Raises:
            NotBoundError: The attribute was never enumerated
        """
        for klass in owner.__mro__:
            overlay = self._overlays.get((klass, attribute))
            if overlay is not None:
                return overlay
        raise NotBoundError(attribute, owner.__name__)
    
    def enumerated_attributes(self, owner: type) -> dict[str, Any]:
        """Attribute name -> enum type, for every binding visible from owner."""
        return {b.attribute: b.enum_type for b in self.registry.bindings_for(owner)}
    
    def _install(self, owner: type, attribute: str) -> EnumOverlay:
        existing = self._overlays.get((owner, attribute))
        if existing is not None:
            # Re-declaration: the registry already points at the new type
            return existing
        
        overlay = EnumOverlay(
            owner=owner,
            attribute=attribute,
            original=capture_accessors(owner, attribute),
            registry=self.registry,
        )
        self._overlays[(owner, attribute)] = overlay
        return overlay
