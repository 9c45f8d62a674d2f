import unittest
from typing import Annotated

import pytest

from litewire import (
    BeanStore,
    Inject,
    InjectabilityPolicy,
    MarkerDrivenPolicy,
    Policy,
    TypeDrivenPolicy,
    describe,
    resolve_policy,
)


class Engine: ...


class Car:
    engine: Engine
    marked_engine: Annotated[Engine, Inject]
    spare: Engine | None = None
    label: str = "car"


class TestPolicies(unittest.TestCase):
    def setUp(self):
        self.store = BeanStore.build([Engine, Car])
        self.fields = {f.name: f for f in describe(Car).fields}

    def test_type_driven_selects_every_satisfiable_class_field(self):
        policy = TypeDrivenPolicy()
        selected = {name for name, f in self.fields.items() if policy.is_injectable(f, self.store)}
        assert selected == {"engine", "marked_engine"}

    def test_marker_driven_selects_marked_fields_only(self):
        policy = MarkerDrivenPolicy()
        selected = {name for name, f in self.fields.items() if policy.is_injectable(f, self.store)}
        assert selected == {"marked_engine"}

    def test_marker_driven_selects_marked_field_even_without_bean(self):
        empty = BeanStore.build([])
        assert MarkerDrivenPolicy().is_injectable(self.fields["marked_engine"], empty)
        assert not TypeDrivenPolicy().is_injectable(self.fields["engine"], empty)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("type", TypeDrivenPolicy),
        ("MARKER", MarkerDrivenPolicy),
        (Policy.TYPE, TypeDrivenPolicy),
        (Policy.MARKER, MarkerDrivenPolicy),
    ],
)
def test_resolve_policy_from_configuration(value, expected):
    assert isinstance(resolve_policy(value), expected)


def test_resolve_policy_passes_strategies_through():
    class OnlyEngines:
        def is_injectable(self, field, store):
            return field.declared_type is Engine

    strategy = OnlyEngines()
    assert resolve_policy(strategy) is strategy
    assert isinstance(strategy, InjectabilityPolicy)


def test_resolve_policy_unknown_name_raises():
    with pytest.raises(ValueError, match="expected one of: type, marker"):
        resolve_policy("constructor")


def test_resolve_policy_rejects_objects_without_is_injectable():
    with pytest.raises(TypeError):
        resolve_policy(object())  # type: ignore[arg-type]
