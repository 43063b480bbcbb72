"""RedisDataStore — read-only data store over a single Redis hash."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fedstore_core.ports.data_store import IDataStore

from .bridge import BridgeDispatcher
from .codec import RecordCodec
from .fetch import ScanFetchEngine
from .models import RedisAction
from .transaction import RedisTransaction

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fedstore_core.ports.dictionary import IEntityDictionary
    from fedstore_core.ports.key_value import IKeyValueClient

    from .bridge import BridgeRoute
    from .codec import KeyCodec
    from .fetch import MalformedPolicy


def canonical_name(entity_cls: type[Any]) -> str:
    """Dotted ``module.QualName`` of ``entity_cls``; the default namespace key."""
    return f"{entity_cls.__module__}.{entity_cls.__qualname__}"


class RedisDataStore(IDataStore):
    """
    Owns one entity class stored as a flat hash.

    Every record lives under a single hash key (``namespace``, by default
    the canonical class name). Field names follow ``key_codec`` and values
    hold ``value_field`` verbatim.

    Args:
        client: Redis client (``redis.Redis``). Not closed by the store.
        entity_cls: Entity class materialized from the hash.
        namespace: Hash key; defaults to ``canonical_name(entity_cls)``.
        key_codec: Field-name layout; defaults to ``user<owner>:<id>``.
        owner_field: Filter attribute that selects records by owner.
        value_field: Entity attribute receiving the hash value.
        on_malformed: ``"raise"`` or ``"skip"`` for undecodable fields.
        bridges: Dispatcher, or routes to build one, for relations whose
            parent lives in another store.
    """

    def __init__(
        self,
        client: IKeyValueClient,
        *,
        entity_cls: type[Any] = RedisAction,
        namespace: str | None = None,
        key_codec: KeyCodec | None = None,
        owner_field: str = "user_id",
        value_field: str = "description",
        on_malformed: MalformedPolicy = "raise",
        bridges: BridgeDispatcher | Iterable[BridgeRoute] | None = None,
    ) -> None:
        self.entity_cls = entity_cls
        self.namespace = namespace or canonical_name(entity_cls)
        self.owner_field = owner_field
        self.engine = ScanFetchEngine(
            client,
            RecordCodec(entity_cls, key_codec, value_field=value_field),
            on_malformed=on_malformed,
        )
        if isinstance(bridges, BridgeDispatcher):
            self.bridges = bridges
        else:
            self.bridges = BridgeDispatcher(bridges or ())

    def populate_entity_dictionary(self, dictionary: IEntityDictionary) -> None:
        dictionary.bind_entity(self.entity_cls)

    def validate_bridges(self, dictionary: IEntityDictionary) -> None:
        """Fail fast if a bridge route does not lead to this store's entity."""
        self.bridges.validate(
            dictionary, target_cls=self.entity_cls, owner_field=self.owner_field
        )

    def begin_transaction(self) -> RedisTransaction:
        return RedisTransaction(self)

    def begin_read_transaction(self) -> RedisTransaction:
        return RedisTransaction(self)
