"""
Accessor Overlay — Enum-aware read, write and check over an attribute.

An overlay holds the attribute's original accessors as explicit state and
delegates to them whenever no enum-specific behaviour is asked for. It looks
up the bound enum type in the registry on every call, so re-declaring an
attribute takes effect for overlays already handed out.

    overlay = binder.overlay_for(User, "sex")
    overlay.write(user, "male")
    overlay.read(user)            # 1, or "Male" with use_name_as_value
    overlay.read(user, "id")      # 1
    overlay.check(user, "male")   # True
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from numbers import Number
from collections.abc import Sized
from typing import Any, Callable

from enum_overlay.config import get_settings
from enum_overlay.errors import NotBoundError, UnmappedKeyError
from enum_overlay.lookup import EnumLookupTable, entry_for, is_symbolic_key
from enum_overlay.observability.logging import get_logger
from enum_overlay.registry import EnumRegistry
from enum_overlay.vocabulary import AccessorKind, ReadMode, UnmappedKeyPolicy

logger = get_logger("overlay")

Reader = Callable[[Any], Any]
Writer = Callable[[Any, Any], None]
Checker = Callable[[Any], bool]


def query_value(value: Any) -> bool:
    """
    Presence test used by the default check accessor.

    None and False are absent, numbers are present when non-zero, strings
    when non-blank and containers when non-empty.
    """
    if value is None or value is False:
        return False
    if value is True:
        return True
    if isinstance(value, Number):
        return value != 0
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Sized):
        return len(value) > 0
    return True


@dataclass(frozen=True)
class AccessorSet:
    """The original accessors of one attribute, captured before overlaying."""
    read: Reader
    write: Writer
    check: Checker
    custom: frozenset[AccessorKind] = frozenset()


def default_accessors(attribute: str) -> AccessorSet:
    """
    Accessors that go through the instance's own attribute lookup.

    Properties and query_<attribute> methods are found on the instance's
    class at call time, so overrides in subclasses are honoured.
    """
    query_name = f"query_{attribute}"

    def read(instance: Any) -> Any:
        return getattr(instance, attribute)

    def write(instance: Any, value: Any) -> None:
        setattr(instance, attribute, value)

    def check(instance: Any) -> bool:
        query = getattr(instance, query_name, None)
        if callable(query):
            return query()
        return query_value(read(instance))

    return AccessorSet(read=read, write=write, check=check)


def capture_accessors(owner: type, attribute: str) -> AccessorSet:
    """
    Capture the accessors an overlay for owner.attribute should wrap.

    A property named after the attribute counts as a custom read (and, when
    it has a setter, write) accessor; a method named query_<attribute> as a
    custom check. Dispatch always goes through the instance, so ``custom``
    only records what the owner had at declaration time.
    """
    custom: set[AccessorKind] = set()

    declared = inspect.getattr_static(owner, attribute, None)
    if isinstance(declared, property):
        if declared.fget is not None:
            custom.add(AccessorKind.READ)
        if declared.fset is not None:
            custom.add(AccessorKind.WRITE)

    if callable(getattr(owner, f"query_{attribute}", None)):
        custom.add(AccessorKind.CHECK)

    defaults = default_accessors(attribute)
    return AccessorSet(
        read=defaults.read,
        write=defaults.write,
        check=defaults.check,
        custom=frozenset(custom),
    )


def _coerce_mode(mode: Any) -> ReadMode | None:
    if mode is None or isinstance(mode, ReadMode):
        return mode
    try:
        return ReadMode(mode)
    except ValueError:
        return None


@dataclass
class EnumOverlay:
    """
    Read, write and check for one enumerated attribute of one owner class.

    None of these calls raise from enum translation. Errors raised by the
    original accessors propagate unchanged.
    """
    owner: type
    attribute: str
    original: AccessorSet
    registry: EnumRegistry = field(repr=False)

    def enum_type(self, instance: Any = None) -> EnumLookupTable:
        """Enum type bound for the instance's class (or the owner)."""
        klass = self.owner if instance is None else type(instance)
        table = self.registry.lookup(klass, self.attribute)
        if table is None:
            raise NotBoundError(self.attribute, klass.__name__)
        return table

    def read(self, instance: Any, mode: ReadMode | str | None = None) -> Any:
        """
        Read the attribute.

        Args:
            instance: Model instance
            mode: "id", "name", "enum" or None. Unknown modes read as None.

        Returns:
            - None: raw code, or display name when use_name_as_value is set
            - "id": raw code if the table has an entry for it, else None
            - "name": display name for the raw code, else None
            - "enum": the bound lookup table
        """
        mode = _coerce_mode(mode)
        table = self.enum_type(instance)

        if mode is ReadMode.ENUM:
            return table

        value = self.original.read(instance)

        if mode is ReadMode.ID:
            if value is None or is_symbolic_key(value):
                return None
            return value if table.find_by_id(value) is not None else None

        if mode is ReadMode.NAME:
            return _display_name(table, value)

        if get_settings().use_name_as_value:
            return _display_name(table, value)
        return value

    def write(self, instance: Any, value: Any) -> None:
        """
        Write a raw code or symbolic key.

        Keys are translated to their raw code. Raw codes are written as
        given, known to the table or not.
        """
        if not is_symbolic_key(value):
            self.original.write(instance, value)
            return

        table = self.enum_type(instance)
        raw_code = table.map_to_value(value)
        if raw_code is None:
            raw_code = self._unmapped(value)
        self.original.write(instance, raw_code)

    def check(self, instance: Any, key: Any = None) -> bool:
        """
        With a key: does the stored raw code refer to the key's entry?
        Without: the original presence check. A bool is never a key, so
        check(False) and check(True) are the presence check too.
        """
        if key is None or isinstance(key, bool):
            return bool(self.original.check(instance))

        table = self.enum_type(instance)
        value = self.original.read(instance)
        if is_symbolic_key(value):
            return False
        current = entry_for(table, value)
        wanted = entry_for(table, key)
        return current is not None and current == wanted

    def bind(self, instance: Any) -> BoundEnumAttribute:
        return BoundEnumAttribute(instance=instance, overlay=self)

    def _unmapped(self, key: str) -> Any:
        policy = get_settings().unmapped_key_policy
        if policy is UnmappedKeyPolicy.RAISE:
            raise UnmappedKeyError(self.attribute, key)

        logger.warning(
            f"Unmapped key {key!r} written to {self.owner.__qualname__}.{self.attribute} "
            f"(policy: {policy.value})"
        )
        if policy is UnmappedKeyPolicy.PASS_THROUGH:
            return key
        return None


def _display_name(table: EnumLookupTable, value: Any) -> Any | None:
    if value is None or is_symbolic_key(value):
        return None
    return table.map_to_value(value)


@dataclass
class BoundEnumAttribute:
    """An overlay paired with one instance."""
    instance: Any
    overlay: EnumOverlay

    @property
    def attribute(self) -> str:
        return self.overlay.attribute

    @property
    def enum(self) -> EnumLookupTable:
        return self.overlay.read(self.instance, ReadMode.ENUM)

    def read(self, mode: ReadMode | str | None = None) -> Any:
        return self.overlay.read(self.instance, mode)

    def write(self, value: Any) -> None:
        self.overlay.write(self.instance, value)

    def check(self, key: Any = None) -> bool:
        return self.overlay.check(self.instance, key)

    def __repr__(self) -> str:
        return (
            f"BoundEnumAttribute({type(self.instance).__name__}.{self.attribute}"
            f"={self.overlay.original.read(self.instance)!r})"
        )
