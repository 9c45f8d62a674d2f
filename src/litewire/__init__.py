"""Minimal field-injection dependency container.

This package builds a wired object graph from a set of classes: every class is
instantiated once with no arguments, then the annotated fields of every bean are
filled with the other beans, matched by exact type or by capability (base class,
ABC or Protocol subclass).

Exports:
- `Container`: Builds and queries the object graph (`get_bean`).
- `TypeDrivenPolicy` / `MarkerDrivenPolicy`: Choose which fields get injected;
  every satisfiable field, or only fields marked `Annotated[T, Inject]`.
- `component`, `service`, `repository`: Class markers found by `discover_types`
  and `Container.for_package`.
- `describe`: Field and capability introspection used by the injector.
"""

from ._container import Container, ContainerState
from ._errors import (
    AmbiguousBeanError,
    ContainerError,
    ContainerStateError,
    InjectionError,
    InstantiationError,
    NotFoundError,
    ResolutionError,
)
from ._injector import Injector
from ._introspect import FieldSpec, TypeDescription, capabilities_of, describe
from ._markers import Inject, component, component_kind, is_component, is_inject_marker, repository, service
from ._policy import InjectabilityPolicy, MarkerDrivenPolicy, Policy, TypeDrivenPolicy, resolve_policy
from ._scanner import discover_types
from ._store import BeanStore


__all__ = [
    "AmbiguousBeanError",
    "BeanStore",
    "Container",
    "ContainerError",
    "ContainerState",
    "ContainerStateError",
    "FieldSpec",
    "Inject",
    "InjectabilityPolicy",
    "InjectionError",
    "Injector",
    "InstantiationError",
    "MarkerDrivenPolicy",
    "NotFoundError",
    "Policy",
    "ResolutionError",
    "TypeDescription",
    "TypeDrivenPolicy",
    "capabilities_of",
    "component",
    "component_kind",
    "describe",
    "discover_types",
    "is_component",
    "is_inject_marker",
    "repository",
    "resolve_policy",
    "service",
]
