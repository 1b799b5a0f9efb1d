"""Tests for attribute instances."""

import pytest

from entity_attributes.core import AttributeInstance, AttributeKind, Modifier, Operation


@pytest.fixture
def kind() -> AttributeKind:
    return AttributeKind(id="critical_bonus_damage", base=0.5, min=-1.0, max=1024.0)


class TestBaseValue:
    """Test base value and overrides."""

    def test_defaults_to_kind_base(self, kind):
        """Test that the base is the kind's base when not overridden."""
        instance = AttributeInstance(kind)

        assert instance.base_override is None
        assert instance.base_value == 0.5

    def test_override(self, kind):
        """Test that setting the base stores an override."""
        instance = AttributeInstance(kind)
        instance.base_value = 2.0

        assert instance.base_override == 2.0
        assert instance.base_value == 2.0
        assert kind.base == 0.5

    def test_clear_override(self, kind):
        """Test clearing the override restores the kind's base."""
        instance = AttributeInstance(kind, base_override=3.0)
        instance.clear_base_override()

        assert instance.base_value == 0.5


class TestModifierCollection:
    """Test adding, replacing and removing modifiers."""

    def test_add_modifier(self, kind):
        """Test that added modifiers are stored by id."""
        instance = AttributeInstance(kind)
        modifier = Modifier(id="a", amount=0.5)

        instance.add_modifier(modifier)

        assert instance.has_modifier("a")
        assert instance.get_modifier("a") is modifier
        assert instance.modifiers == [modifier]

    def test_add_same_id_replaces(self, kind):
        """Test that re-adding an id replaces the previous modifier."""
        instance = AttributeInstance(kind)
        instance.add_modifier(Modifier(id="a", amount=0.5))
        instance.add_modifier(Modifier(id="a", amount=2.0))

        assert len(instance.modifiers) == 1
        assert instance.get_modifier("a").amount == 2.0
        assert instance.value == 2.5

    def test_remove_modifier(self, kind):
        """Test removing a modifier returns it."""
        instance = AttributeInstance(kind)
        modifier = Modifier(id="a", amount=0.5)
        instance.add_modifier(modifier)

        assert instance.remove_modifier("a") is modifier
        assert not instance.has_modifier("a")
        assert instance.value == 0.5

    def test_remove_missing_is_noop(self, kind):
        """Test that removing an unknown id does nothing."""
        instance = AttributeInstance(kind)
        instance.add_modifier(Modifier(id="a", amount=0.5))

        assert instance.remove_modifier("missing") is None
        assert len(instance.modifiers) == 1

    def test_clear_modifiers(self, kind):
        """Test clearing all modifiers."""
        instance = AttributeInstance(kind)
        instance.add_modifier(Modifier(id="a", amount=0.5))
        instance.add_modifier(Modifier(id="b", amount=0.5, operation=Operation.MULTIPLY_TOTAL))

        instance.clear_modifiers()

        assert instance.modifiers == []
        assert instance.value == 0.5

    def test_modifiers_by_operation(self, kind):
        """Test filtering modifiers by operation."""
        instance = AttributeInstance(kind)
        instance.add_modifier(Modifier(id="a", amount=1.0))
        instance.add_modifier(Modifier(id="b", amount=0.5, operation=Operation.MULTIPLY_BASE))
        instance.add_modifier(Modifier(id="c", amount=2.0))

        ids = [m.id for m in instance.modifiers_by_operation(Operation.ADD)]

        assert ids == ["a", "c"]
