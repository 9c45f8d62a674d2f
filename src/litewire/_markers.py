from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar


if TYPE_CHECKING:
    from collections.abc import Callable

    C = TypeVar("C", bound=type)


_COMPONENT_ATTR = "__litewire_component__"


class Inject:
    """Field marker: ``repo: Annotated[Repository, Inject]``.

    Both the class and its instances are accepted as the marker.
    """

    def __repr__(self) -> str:
        return "Inject()"


def is_inject_marker(obj: object) -> bool:
    return obj is Inject or isinstance(obj, Inject)


def _component_marker(kind: str) -> Callable[[C], C]:
    def mark(cls: C) -> C:
        if not isinstance(cls, type):
            msg = f"@{kind} can only decorate classes, got {cls!r}"
            raise TypeError(msg)
        setattr(cls, _COMPONENT_ATTR, kind)
        return cls

    mark.__name__ = kind
    mark.__qualname__ = kind
    return mark


component = _component_marker("component")
service = _component_marker("service")
repository = _component_marker("repository")


def component_kind(cls: type) -> str | None:
    """Return the component marker applied directly to ``cls``.

    Markers live in the class ``__dict__`` so subclasses of a marked class are not
    components unless decorated themselves.
    """
    return vars(cls).get(_COMPONENT_ATTR)


def is_component(cls: type) -> bool:
    return component_kind(cls) is not None
