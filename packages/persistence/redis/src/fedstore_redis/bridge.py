"""Bridging relations whose parent lives in another store.

A :class:`BridgeDispatcher` maps ``(parent type, relation name)`` pairs to
a :class:`BridgeStrategy`. Each strategy knows how to turn a parent
instance into a lookup the multiplex coordinator can route back to the
key-value store: either a direct id held by the parent, or an owner-scoped
predicate on the target records.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn

from fedstore_core.primitives.exceptions import (
    BridgeConfigurationError,
    NotFoundError,
    UnsupportedBridgeError,
)
from fedstore_specifications.ast import AttributeSpecification
from fedstore_specifications.operators import SpecificationOperator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fedstore_core.domain.specification import ISpecification
    from fedstore_core.ports.dictionary import IEntityDictionary
    from fedstore_core.ports.transaction import IMultiplexTransaction
    from fedstore_core.scope import RequestScope

logger = logging.getLogger("fedstore.redis.bridge")


class BridgeStrategy(ABC):
    """How one bridged relation is looked up."""

    @abstractmethod
    def load_one(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        entity_cls: type[Any],
        lookup_id: Any,
        scope: RequestScope,
    ) -> Any | None: ...


class CollectionBridgeStrategy(BridgeStrategy):
    """A bridge that can also load every related record of a parent."""

    @abstractmethod
    def load_many(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        entity_cls: type[Any],
        sorting: Any | None,
        pagination: Any | None,
        scope: RequestScope,
    ) -> list[Any]: ...


class DirectIdBridge(BridgeStrategy):
    """To-one relation whose target id is stored on the parent itself."""

    def __init__(self, id_attribute: str) -> None:
        self.id_attribute = id_attribute

    def load_one(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        entity_cls: type[Any],
        lookup_id: Any,
        scope: RequestScope,
    ) -> Any | None:
        target_id = getattr(parent, self.id_attribute)
        if target_id is None:
            return None
        return mux_tx.load_object(entity_cls, str(target_id), None, scope)

    def __repr__(self) -> str:
        return f"DirectIdBridge(id_attribute={self.id_attribute!r})"


class OwnerScopedBridge(CollectionBridgeStrategy):
    """
    To-many relation whose target keys embed the parent's id.

    The lookup is scoped with a synthesized ``<owner_field> in [parent id]``
    predicate; whatever filter the caller supplied is not used.
    """

    def __init__(self, owner_field: str = "user_id", parent_id_attribute: str = "id") -> None:
        self.owner_field = owner_field
        self.parent_id_attribute = parent_id_attribute

    def owner_filter(self, parent: Any) -> AttributeSpecification:
        return AttributeSpecification(
            self.owner_field,
            SpecificationOperator.IN,
            [str(getattr(parent, self.parent_id_attribute))],
        )

    def load_one(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        entity_cls: type[Any],
        lookup_id: Any,
        scope: RequestScope,
    ) -> Any | None:
        return mux_tx.load_object(
            entity_cls, str(lookup_id), self.owner_filter(parent), scope
        )

    def load_many(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        entity_cls: type[Any],
        sorting: Any | None,
        pagination: Any | None,
        scope: RequestScope,
    ) -> list[Any]:
        return list(
            mux_tx.load_objects(
                entity_cls, self.owner_filter(parent), sorting, pagination, scope
            )
        )

    def __repr__(self) -> str:
        return (
            f"OwnerScopedBridge(owner_field={self.owner_field!r}, "
            f"parent_id_attribute={self.parent_id_attribute!r})"
        )


@dataclass(frozen=True)
class BridgeRoute:
    parent_type: type[Any]
    relation_name: str
    strategy: BridgeStrategy


class BridgeDispatcher:
    """
    Fixed table of supported bridges.

    Routes match on the exact parent class, so subclasses of a registered
    parent type need their own routes. The dispatcher holds no per-call
    state and is safe to share between transactions.
    """

    def __init__(self, routes: Iterable[BridgeRoute] = ()) -> None:
        self._routes: dict[tuple[type[Any], str], BridgeStrategy] = {}
        for route in routes:
            self.register(route.parent_type, route.relation_name, route.strategy)

    # -- registration --------------------------------------------------------

    def register(
        self, parent_type: type[Any], relation_name: str, strategy: BridgeStrategy
    ) -> BridgeDispatcher:
        key = (parent_type, relation_name)
        if key in self._routes:
            raise BridgeConfigurationError(
                f"Bridge {parent_type.__qualname__}.{relation_name} is already registered"
            )
        self._routes[key] = strategy
        return self

    @property
    def routes(self) -> list[BridgeRoute]:
        return [
            BridgeRoute(parent_type, relation_name, strategy)
            for (parent_type, relation_name), strategy in self._routes.items()
        ]

    def resolve(self, parent: Any, relation_name: str) -> BridgeStrategy | None:
        return self._routes.get((type(parent), relation_name))

    def validate(
        self,
        dictionary: IEntityDictionary,
        *,
        target_cls: type[Any] | None = None,
        owner_field: str | None = None,
    ) -> None:
        """
        Check every route against the entity dictionary.

        Each relation must resolve to a bound entity class and, when
        ``target_cls`` is given, to that class. When ``owner_field`` is
        given, owner-scoped routes must filter on that field.
        """
        for (parent_type, relation_name), strategy in self._routes.items():
            name = f"{parent_type.__qualname__}.{relation_name}"
            try:
                resolved = dictionary.get_parameterized_type(parent_type, relation_name)
            except NotFoundError as e:
                raise BridgeConfigurationError(f"Bridge {name}: {e}") from e
            if not dictionary.is_bound(resolved):
                raise BridgeConfigurationError(
                    f"Bridge {name} targets unbound entity {resolved.__qualname__}"
                )
            if target_cls is not None and resolved is not target_cls:
                raise BridgeConfigurationError(
                    f"Bridge {name} targets {resolved.__qualname__}, "
                    f"expected {target_cls.__qualname__}"
                )
            if (
                owner_field is not None
                and isinstance(strategy, OwnerScopedBridge)
                and strategy.owner_field != owner_field
            ):
                raise BridgeConfigurationError(
                    f"Bridge {name} filters on {strategy.owner_field!r}, "
                    f"but the store selects owners by {owner_field!r}"
                )
            logger.debug("Validated bridge %s -> %r", name, strategy)

    # -- dispatch ------------------------------------------------------------

    def bridge_load_one(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        relation_name: str,
        lookup_id: Any,
        filter_expression: ISpecification | None,
        scope: RequestScope,
    ) -> Any | None:
        strategy = self.resolve(parent, relation_name)
        if strategy is None:
            self._reject(parent, relation_name)

        self._ignore_filter(filter_expression, relation_name)
        entity_cls = scope.dictionary.get_parameterized_type(parent, relation_name)
        return strategy.load_one(mux_tx, parent, entity_cls, lookup_id, scope)

    def bridge_load_many(
        self,
        mux_tx: IMultiplexTransaction,
        parent: Any,
        relation_name: str,
        filter_expression: ISpecification | None,
        sorting: Any | None,
        pagination: Any | None,
        scope: RequestScope,
    ) -> list[Any]:
        strategy = self.resolve(parent, relation_name)
        if not isinstance(strategy, CollectionBridgeStrategy):
            self._reject(parent, relation_name)

        self._ignore_filter(filter_expression, relation_name)
        entity_cls = scope.dictionary.get_parameterized_type(parent, relation_name)
        return strategy.load_many(
            mux_tx, parent, entity_cls, sorting, pagination, scope
        )

    # -- internals -----------------------------------------------------------

    @staticmethod
    def _ignore_filter(
        filter_expression: ISpecification | None, relation_name: str
    ) -> None:
        if filter_expression is not None:
            logger.debug(
                "Ignoring caller filter %r on bridged relation %s",
                filter_expression,
                relation_name,
            )

    @staticmethod
    def _reject(parent: Any, relation_name: str) -> NoReturn:
        logger.error(
            "Tried to bridge from parent: %s to relation name: %s",
            parent,
            relation_name,
        )
        raise UnsupportedBridgeError(parent, relation_name)
