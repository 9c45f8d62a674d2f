from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ._markers import is_inject_marker


if TYPE_CHECKING:
    from collections.abc import Callable

    from ._introspect import FieldSpec
    from ._store import BeanStore


class Policy(Enum):
    TYPE = "type"
    MARKER = "marker"


@runtime_checkable
class InjectabilityPolicy(Protocol):
    def is_injectable(self, field: FieldSpec, store: BeanStore) -> bool: ...


class TypeDrivenPolicy:
    """Inject every field whose declared type is satisfied by at least one bean."""

    def is_injectable(self, field: FieldSpec, store: BeanStore) -> bool:
        if not field.resolved or not field.is_class:
            return False
        return bool(store.candidates(field.declared_type))

    def __repr__(self) -> str:
        return "TypeDrivenPolicy()"


class MarkerDrivenPolicy:
    """Inject only fields carrying a marker, e.g. ``Annotated[Repo, Inject]``.

    A marked field that no bean satisfies fails the injection instead of being skipped.
    """

    def __init__(self, marker: Callable[[object], bool] = is_inject_marker) -> None:
        self._marker = marker

    def is_injectable(self, field: FieldSpec, store: BeanStore) -> bool:  # noqa: ARG002
        if not field.resolved:
            return False
        return any(self._marker(m) for m in field.markers)

    def __repr__(self) -> str:
        return f"MarkerDrivenPolicy(marker={getattr(self._marker, '__name__', self._marker)!r})"


def resolve_policy(value: InjectabilityPolicy | Policy | str) -> InjectabilityPolicy:
    """Accept a policy strategy, a ``Policy`` member, or its name ("type" / "marker")."""
    if isinstance(value, str):
        try:
            value = Policy(value.lower())
        except ValueError:
            choices = ", ".join(p.value for p in Policy)
            msg = f"Unknown injectability policy {value!r}; expected one of: {choices}"
            raise ValueError(msg) from None

    if value is Policy.TYPE:
        return TypeDrivenPolicy()
    if value is Policy.MARKER:
        return MarkerDrivenPolicy()

    if not isinstance(value, InjectabilityPolicy):
        msg = f"{value!r} does not provide is_injectable(field, store)"
        raise TypeError(msg)
    return value
