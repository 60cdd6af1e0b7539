"""Tests for the read/write/check accessor overlay."""

import logging

import pytest

from enum_overlay import (
    AccessorKind,
    EnumOverlay,
    EnumRegistry,
    NotBoundError,
    ReadMode,
    UnmappedKeyError,
    UnmappedKeyPolicy,
    capture_accessors,
    configure,
    query_value,
    settings_override,
)


class Record:
    """Plain storage class; the attribute is an ordinary instance attribute."""
    
    def __init__(self, sex=None):
        self.sex = sex


@pytest.fixture
def registry(sex_table):
    registry = EnumRegistry()
    registry.register(Record, "sex", sex_table)
    return registry


@pytest.fixture
def overlay(registry):
    return EnumOverlay(
        owner=Record,
        attribute="sex",
        original=capture_accessors(Record, "sex"),
        registry=registry,
    )


# =============================================================================
# Read
# =============================================================================

class TestRead:
    """Tests for the read accessor modes."""
    
    def test_default_returns_raw_code(self, overlay):
        """Without a mode the raw code comes back."""
        assert overlay.read(Record(sex=1)) == 1
    
    def test_default_returns_name_when_configured(self, overlay):
        """use_name_as_value switches the default to the display name."""
        configure(use_name_as_value=True)
        
        assert overlay.read(Record(sex=1)) == "Male"
    
    def test_id_mode(self, overlay):
        """'id' returns the raw code when the table knows it."""
        assert overlay.read(Record(sex=2), "id") == 2
        assert overlay.read(Record(sex=2), ReadMode.ID) == 2
    
    def test_id_mode_unmapped_is_none(self, overlay):
        """'id' never returns a raw code without an entry."""
        assert overlay.read(Record(sex=99), "id") is None
        assert overlay.read(Record(sex=None), "id") is None
    
    def test_name_mode(self, overlay):
        """'name' maps the raw code to the display name."""
        assert overlay.read(Record(sex=2), "name") == "Female"
        assert overlay.read(Record(sex=99), "name") is None
        assert overlay.read(Record(sex=None), "name") is None
    
    def test_enum_mode_returns_table(self, overlay, sex_table):
        """'enum' returns the bound table for introspection."""
        assert overlay.read(Record(sex=1), "enum") is sex_table
        assert overlay.read(Record(sex=1), ReadMode.ENUM) is sex_table
    
    @pytest.mark.parametrize("mode", ["label", 42, ("id",), ""])
    def test_unknown_mode_reads_as_default(self, overlay, mode):
        """Unknown modes fall back to the default branch."""
        assert overlay.read(Record(sex=1), mode) == 1
        
        with settings_override(use_name_as_value=True):
            assert overlay.read(Record(sex=1), mode) == "Male"
    
    def test_default_reflects_unmapped_storage(self, overlay):
        """The default read shows whatever raw value is stored."""
        assert overlay.read(Record(sex=99)) == 99
    
    def test_read_does_not_mutate(self, overlay):
        """Reading in any mode leaves storage untouched."""
        record = Record(sex=1)
        for mode in (None, "id", "name", "enum", "other"):
            overlay.read(record, mode)
        
        assert record.sex == 1


# =============================================================================
# Write
# =============================================================================

class TestWrite:
    """Tests for the write accessor."""
    
    def test_symbolic_key_stores_raw_code(self, overlay):
        """Keys are translated before storing."""
        record = Record()
        overlay.write(record, "female")
        
        assert record.sex == 2
        assert overlay.read(record, "id") == 2
    
    def test_raw_code_stored_unchanged(self, overlay):
        """Raw codes bypass translation."""
        record = Record()
        overlay.write(record, 1)
        
        assert record.sex == 1
    
    def test_unknown_raw_code_stored_unchanged(self, overlay):
        """No validation on write: unmapped codes are stored as given."""
        record = Record()
        overlay.write(record, 99)
        
        assert record.sex == 99
        assert overlay.read(record, "id") is None
        assert overlay.read(record) == 99
    
    def test_none_stored(self, overlay):
        """None is a raw value like any other."""
        record = Record(sex=1)
        overlay.write(record, None)
        
        assert record.sex is None
    
    def test_unmapped_key_stores_none_by_default(self, overlay, caplog):
        """Default policy stores None and logs a warning."""
        record = Record(sex=1)
        
        with caplog.at_level(logging.WARNING, logger="enum_overlay.overlay"):
            overlay.write(record, "unknown")
        
        assert record.sex is None
        assert "unknown" in caplog.text
    
    def test_unmapped_key_pass_through(self, overlay):
        """PASS_THROUGH stores the key string itself."""
        configure(unmapped_key_policy=UnmappedKeyPolicy.PASS_THROUGH)
        record = Record(sex=1)
        
        overlay.write(record, "unknown")
        
        assert record.sex == "unknown"
        assert overlay.read(record, "id") is None
        assert overlay.read(record, "name") is None
    
    def test_unmapped_key_raise(self, overlay):
        """RAISE rejects the write and leaves storage alone."""
        configure(unmapped_key_policy="raise")
        record = Record(sex=1)
        
        with pytest.raises(UnmappedKeyError) as exc_info:
            overlay.write(record, "unknown")
        
        assert exc_info.value.key == "unknown"
        assert exc_info.value.attribute == "sex"
        assert record.sex == 1


# =============================================================================
# Check
# =============================================================================

class TestCheck:
    """Tests for the check (predicate) accessor."""
    
    def test_matching_key(self, overlay):
        """True only when the stored code is the key's entry."""
        record = Record(sex=1)
        
        assert overlay.check(record, "male") is True
        assert overlay.check(record, "female") is False
    
    def test_unknown_key_is_false(self, overlay):
        """Unknown keys never match."""
        assert overlay.check(Record(sex=1), "unknown") is False
    
    def test_unmapped_stored_code_is_false(self, overlay):
        """An unmapped stored code never matches."""
        assert overlay.check(Record(sex=99), "male") is False
        assert overlay.check(Record(sex=None), "male") is False
    
    def test_raw_code_as_key(self, overlay):
        """A raw code given as the key is looked up by id."""
        assert overlay.check(Record(sex=2), 2) is True
        assert overlay.check(Record(sex=2), 1) is False
    
    def test_independent_of_use_name_as_value(self, overlay):
        """Comparison uses entries, not the default read."""
        configure(use_name_as_value=True)
        
        assert overlay.check(Record(sex=1), "male") is True
    
    def test_without_key_delegates_to_presence(self, overlay):
        """No key: the original presence check."""
        assert overlay.check(Record(sex=1)) is True
        assert overlay.check(Record(sex=None)) is False
        assert overlay.check(Record(sex=0)) is False
    
    def test_bool_key_is_presence_check(self, status_table):
        """check(False) and check(True) never look up a raw code of 0 or 1."""
        registry = EnumRegistry()
        registry.register(Record, "sex", status_table)
        overlay = EnumOverlay(
            owner=Record,
            attribute="sex",
            original=capture_accessors(Record, "sex"),
            registry=registry,
        )
        
        assert overlay.check(Record(sex=0), False) is False
        assert overlay.check(Record(sex=0), True) is False
        assert overlay.check(Record(sex=1), False) is True


# =============================================================================
# Original accessors
# =============================================================================

class TestCaptureAccessors:
    """Tests for the non-clobbering guard."""
    
    def test_defaults_when_nothing_custom(self):
        """Plain attributes get generated accessors."""
        accessors = capture_accessors(Record, "sex")
        record = Record(sex=2)
        
        assert accessors.custom == frozenset()
        assert accessors.read(record) == 2
        accessors.write(record, 1)
        assert record.sex == 1
        assert accessors.check(record) is True
    
    def test_custom_property_is_wrapped(self, sex_table):
        """A property's getter and setter become the originals."""
        
        class Audited:
            def __init__(self):
                self._sex = None
                self.writes = []
            
            @property
            def sex(self):
                return self._sex
            
            @sex.setter
            def sex(self, value):
                self.writes.append(value)
                self._sex = value
        
        registry = EnumRegistry()
        registry.register(Audited, "sex", sex_table)
        overlay = EnumOverlay(
            owner=Audited,
            attribute="sex",
            original=capture_accessors(Audited, "sex"),
            registry=registry,
        )
        record = Audited()
        
        overlay.write(record, "male")
        
        assert overlay.original.custom == {AccessorKind.READ, AccessorKind.WRITE}
        assert record.writes == [1]
        assert overlay.read(record, "name") == "Male"
        assert overlay.check(record) is True
    
    def test_read_only_property_keeps_default_writer(self):
        """A getter-only property still fails on write, as it would without the overlay."""
        
        class Fixed:
            @property
            def sex(self):
                return 1
        
        accessors = capture_accessors(Fixed, "sex")
        
        assert accessors.custom == {AccessorKind.READ}
        with pytest.raises(AttributeError):
            accessors.write(Fixed(), 2)
    
    def test_custom_query_method_is_wrapped(self, sex_table):
        """query_<attribute> becomes the original check."""
        
        class Flagged:
            def __init__(self, sex):
                self.sex = sex
            
            def query_sex(self):
                return self.sex == 2
        
        registry = EnumRegistry()
        registry.register(Flagged, "sex", sex_table)
        overlay = EnumOverlay(
            owner=Flagged,
            attribute="sex",
            original=capture_accessors(Flagged, "sex"),
            registry=registry,
        )
        
        assert AccessorKind.CHECK in overlay.original.custom
        assert overlay.check(Flagged(1)) is False
        assert overlay.check(Flagged(2)) is True
        assert overlay.check(Flagged(1), "male") is True    
    def test_subclass_property_override_is_used(self, sex_table):
        """A subclass property wins over the declaring class's property."""
        
        class Base:
            @property
            def sex(self):
                return None
        
        class Child(Base):
            def __init__(self):
                self.writes = []
            
            @property
            def sex(self):
                return 2
            
            @sex.setter
            def sex(self, value):
                self.writes.append(value)
        
        registry = EnumRegistry()
        registry.register(Base, "sex", sex_table)
        overlay = EnumOverlay(
            owner=Base,
            attribute="sex",
            original=capture_accessors(Base, "sex"),
            registry=registry,
        )
        child = Child()
        
        assert overlay.read(child) == 2
        assert overlay.read(child, "name") == "Female"
        assert overlay.check(child, "female") is True
        overlay.write(child, "male")
        assert child.writes == [1]
    
    def test_subclass_query_override_is_used(self, sex_table):
        """A subclass query_<attribute> wins over the parent's, or over none."""
        
        class Base:
            def __init__(self, sex):
                self.sex = sex
            
            def query_sex(self):
                return True
        
        class Child(Base):
            def query_sex(self):
                return False
        
        class Plain:
            def __init__(self, sex):
                self.sex = sex
        
        class Flagged(Plain):
            def query_sex(self):
                return self.sex == 2
        
        registry = EnumRegistry()
        registry.register(Base, "sex", sex_table)
        registry.register(Plain, "sex", sex_table)
        base_overlay = EnumOverlay(
            owner=Base,
            attribute="sex",
            original=capture_accessors(Base, "sex"),
            registry=registry,
        )
        plain_overlay = EnumOverlay(
            owner=Plain,
            attribute="sex",
            original=capture_accessors(Plain, "sex"),
            registry=registry,
        )
        
        assert base_overlay.check(Base(1)) is True
        assert base_overlay.check(Child(1)) is False
        assert plain_overlay.original.custom == frozenset()
        assert plain_overlay.check(Flagged(1)) is False
        assert plain_overlay.check(Flagged(2)) is True

    
    def test_original_errors_propagate(self, overlay):
        """Errors from the original reader are not swallowed."""
        
        class Empty:
            pass
        
        with pytest.raises(AttributeError):
            overlay.original.read(Empty())


class TestNotBound:
    """Tests for overlays whose binding disappeared."""
    
    def test_unregistered_raises_not_bound(self, registry, overlay):
        """An overlay without a binding raises NotBoundError."""
        registry.unregister(Record, "sex")
        
        with pytest.raises(NotBoundError):
            overlay.read(Record(sex=1))


class TestQueryValue:
    """Tests for the default presence rule."""
    
    @pytest.mark.parametrize("value,expected", [
        (None, False),
        (False, False),
        (True, True),
        (0, False),
        (0.0, False),
        (3, True),
        ("", False),
        ("   ", False),
        ("x", True),
        ([], False),
        ([0], True),
        (object(), True),
    ])
    def test_presence(self, value, expected):
        assert query_value(value) is expected
