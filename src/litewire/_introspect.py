from __future__ import annotations

import abc
import functools
import inspect
import logging
import sys
import types
import typing
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Protocol, get_args, get_origin

from ._markers import is_inject_marker


logger = logging.getLogger(__name__)

# Bases that every Protocol / generic class carries; never useful as lookup keys.
_NON_CAPABILITIES: tuple[Any, ...] = (object, abc.ABC, Protocol, Generic)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    declared_type: Any
    annotation: Any
    markers: tuple[Any, ...] = ()
    # Set when the annotation cannot be evaluated; such fields are never injected.
    unresolved: str | None = None

    @property
    def resolved(self) -> bool:
        return self.unresolved is None

    @property
    def marked(self) -> bool:
        return any(is_inject_marker(m) for m in self.markers)

    @property
    def is_class(self) -> bool:
        # list[int] passes isinstance(..., type) on some interpreters
        return inspect.isclass(self.declared_type) and not isinstance(self.declared_type, types.GenericAlias)


@dataclass(frozen=True)
class TypeDescription:
    type: type
    fields: tuple[FieldSpec, ...]
    capabilities: tuple[type, ...]


def capabilities_of(cls: type) -> tuple[type, ...]:
    """Every nominal supertype of ``cls``: base classes, ABCs and Protocol subclasses."""
    return tuple(base for base in cls.__mro__[1:] if base not in _NON_CAPABILITIES)


@functools.lru_cache(maxsize=256)
def describe(cls: type) -> TypeDescription:
    """Describe the injectable surface of ``cls``.

    Fields are the class-level annotations across the MRO, base classes first;
    a subclass annotation replaces the base one in place. ``ClassVar`` annotations
    are skipped. ``Annotated`` metadata is kept as the field markers and stripped
    from ``declared_type``.

    Each annotation is evaluated on its own, in the namespace of the class that
    declares it. One that cannot be evaluated (e.g. a name imported only under
    ``TYPE_CHECKING``) yields an unresolved field instead of failing the class.
    """
    fields: dict[str, FieldSpec] = {}
    for owner in reversed(cls.__mro__):
        if owner in _NON_CAPABILITIES:
            continue

        globalns = getattr(sys.modules.get(owner.__module__), "__dict__", {})
        localns = dict(vars(owner))
        for name, raw in _own_annotations(owner).items():
            try:
                annotation = _evaluate(raw, globalns, localns)
                if _is_classvar(annotation):
                    fields.pop(name, None)
                    continue
                declared, markers = _split_annotated(annotation)
                # Annotated["Repo", Inject] keeps its first argument as a forward reference.
                declared = _evaluate(declared, globalns, localns)
            except (NameError, AttributeError, SyntaxError, TypeError) as exc:
                logger.warning("Cannot resolve annotation of %s.%s (%s)", owner.__qualname__, name, exc)
                fields[name] = FieldSpec(name=name, declared_type=None, annotation=raw, unresolved=str(exc))
                continue

            fields[name] = FieldSpec(name=name, declared_type=declared, annotation=annotation, markers=markers)

    return TypeDescription(type=cls, fields=tuple(fields.values()), capabilities=capabilities_of(cls))


def _evaluate(value: Any, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    if isinstance(value, typing.ForwardRef):
        value = value.__forward_arg__
    if isinstance(value, str):
        value = eval(value, globalns, localns)  # noqa: S307
    return type(None) if value is None else value


if sys.version_info >= (3, 14):
    import annotationlib

    def _own_annotations(owner: type) -> dict[str, Any]:
        return annotationlib.get_annotations(owner, format=annotationlib.Format.FORWARDREF)

else:

    def _own_annotations(owner: type) -> dict[str, Any]:
        return inspect.get_annotations(owner)


def _split_annotated(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    if get_origin(annotation) is typing.Annotated:
        declared, *markers = get_args(annotation)
        # Nested Annotated is flattened by typing, so one level is enough.
        return declared, tuple(markers)
    return annotation, ()


def _is_classvar(annotation: Any) -> bool:
    if annotation is ClassVar:
        return True
    if get_origin(annotation) is typing.Annotated:
        annotation = get_args(annotation)[0]
    return get_origin(annotation) is ClassVar


if hasattr(typing, "is_protocol"):
    # https://docs.python.org/3/library/typing.html#typing.is_protocol
    def is_protocol(tp: object) -> bool:
        return inspect.isclass(tp) and typing.is_protocol(tp)

else:

    def is_protocol(tp: object) -> bool:
        """Detect whether ``tp`` is itself a Protocol class, not merely an implementer of one."""
        return inspect.isclass(tp) and bool(vars(tp).get("_is_protocol", False))
