from __future__ import annotations

import inspect
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar, cast

from ._errors import AmbiguousBeanError, InstantiationError, NotFoundError
from ._introspect import capabilities_of, is_protocol


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    T = TypeVar("T")


class BeanStore:
    """One bean per registered class, keyed by the class itself.

    Populated once by ``build``; membership never changes afterwards.
    """

    def __init__(self, beans: Mapping[type, object]) -> None:
        self._beans: dict[type, object] = dict(beans)
        self._capabilities: dict[type, tuple[type, ...]] = {tp: capabilities_of(tp) for tp in self._beans}

    @classmethod
    def build(cls, types: Iterable[type]) -> BeanStore:
        beans: dict[type, object] = {}
        for tp in types:
            if tp in beans:
                continue
            beans[tp] = _instantiate(tp)
            logger.debug("Instantiated bean %s", tp.__qualname__)
        return cls(beans)

    @property
    def beans(self) -> Mapping[type, object]:
        return MappingProxyType(self._beans)

    @property
    def types(self) -> frozenset[type]:
        return frozenset(self._beans)

    def find_by_type(self, tp: type[T]) -> T:
        try:
            return cast("T", self._beans[tp])
        except KeyError:
            raise NotFoundError(tp) from None

    def find_by_capability(self, tp: type[T]) -> T:
        """Return the bean of exact type ``tp``, else the single bean implementing ``tp``.

        Raises ``NotFoundError`` when nothing matches and ``AmbiguousBeanError`` when
        several beans implement ``tp`` and none of them is exactly ``tp``.
        """
        if tp in self._beans:
            return cast("T", self._beans[tp])

        matches = [bean_type for bean_type, caps in self._capabilities.items() if tp in caps]
        if not matches:
            raise NotFoundError(tp)
        if len(matches) > 1:
            raise AmbiguousBeanError(tp, matches)
        return cast("T", self._beans[matches[0]])

    def candidates(self, tp: Any) -> list[object]:
        """All beans whose exact type or capability set matches ``tp``, in store order."""
        return [bean for bean_type, bean in self._beans.items() if bean_type is tp or tp in self._capabilities[bean_type]]

    def __contains__(self, tp: object) -> bool:
        return tp in self._beans

    def __iter__(self) -> Iterator[object]:
        return iter(self._beans.values())

    def __len__(self) -> int:
        return len(self._beans)

    def __repr__(self) -> str:
        names = ", ".join(tp.__qualname__ for tp in self._beans)
        return f"BeanStore([{names}])"


def _instantiate(tp: object) -> object:
    if not inspect.isclass(tp):
        raise InstantiationError(tp, "not a class")

    if inspect.isabstract(tp):
        raise InstantiationError(tp, "abstract class")

    if is_protocol(tp):
        raise InstantiationError(tp, "protocols cannot be instantiated")

    try:
        inspect.signature(tp).bind()
    except TypeError as exc:
        raise InstantiationError(tp, f"no zero-argument constructor ({exc})") from exc
    except ValueError:
        # Some builtins expose no signature; let the call itself decide.
        pass

    try:
        return tp()
    except Exception as exc:  # noqa: BLE001
        raise InstantiationError(tp, f"constructor raised {type(exc).__name__}: {exc}") from exc
