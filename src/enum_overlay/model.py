"""
Enumerated — Mixin giving model classes the enumerate declaration.

Works on plain classes, dataclasses and pydantic models alike; the
attribute keeps its ordinary storage.

    class User(Enumerated, BaseModel):
        enum_context: ClassVar[EnumContext] = context
        sex: int | None = None

    User.enumerate("sex")                 # finds the table named "Sex"
    user.enumerated("sex").write("male")
    user.enumerated("sex").read("name")   # "Male"
"""

from typing import Any, ClassVar

from enum_overlay.context import EnumContext, default_context
from enum_overlay.overlay import BoundEnumAttribute, EnumOverlay


class Enumerated:
    """Adds enumerate/enum_for to a class and enumerated() to its instances."""
    
    enum_context: ClassVar[EnumContext | None] = None
    
    @classmethod
    def _enum_context(cls) -> EnumContext:
        return cls.enum_context if cls.enum_context is not None else default_context()
    
    @classmethod
    def enumerate(cls, attribute: str, enum_type: Any = None) -> EnumOverlay:
        """
        Declare an attribute enumerated.
        
            User.enumerate("sex", enum_type=Sex)
            User.enumerate("sex")   # implies a Sex enum is registered
        """
        return cls._enum_context().binder.enumerate(cls, attribute, enum_type=enum_type)
    
    @classmethod
    def enum_for(cls, attribute: str) -> Any | None:
        return cls._enum_context().binder.enum_type_for(cls, attribute)
    
    @classmethod
    def enumerated_attributes(cls) -> dict[str, Any]:
        return cls._enum_context().binder.enumerated_attributes(cls)
    
    def enumerated(self, attribute: str) -> BoundEnumAttribute:
        """
        Enum-aware accessors for one attribute of this instance.
        
            user.enumerated("sex").read()
            user.enumerated("sex").read("id")
            user.enumerated("sex").write("male")
            user.enumerated("sex").check("male")
        """
        return self._enum_context().binder.overlay_for(type(self), attribute).bind(self)
