"""EntityDictionary — in-memory type metadata for federated stores."""

from __future__ import annotations

from typing import Any, get_args, get_origin

from pydantic import BaseModel

from ...primitives.exceptions import RelationNotFoundError
from ...ports.dictionary import IEntityDictionary


def _relation_target(annotation: Any) -> type[Any] | None:
    """
    Unwrap a field annotation down to the entity class it refers to.

    ``Other``, ``Other | None``, ``Optional[Other]`` and ``list[Other]`` all
    resolve to ``Other``. ``None`` means no class could be found.
    """
    if isinstance(annotation, type) and get_origin(annotation) is None:
        return annotation
    for arg in get_args(annotation):
        if arg is type(None) or arg is Ellipsis:
            continue
        target = _relation_target(arg)
        if target is not None:
            return target
    return None


class EntityDictionary(IEntityDictionary):
    """In-memory implementation of ``IEntityDictionary``.

    Relation targets are read from pydantic field annotations of the parent
    class. ``bind_relation`` registers an explicit target that takes
    precedence, for relations that are not modelled as fields.
    """

    def __init__(self) -> None:
        self._entities: set[type[Any]] = set()
        self._relations: dict[tuple[type[Any], str], type[Any]] = {}

    def bind_entity(self, entity_cls: type[Any]) -> None:
        self._entities.add(entity_cls)

    def is_bound(self, entity_cls: type[Any]) -> bool:
        return entity_cls in self._entities

    def bind_relation(
        self, parent_cls: type[Any], relation_name: str, target_cls: type[Any]
    ) -> None:
        self._relations[(parent_cls, relation_name)] = target_cls

    @property
    def bound_entities(self) -> frozenset[type[Any]]:
        return frozenset(self._entities)

    def get_parameterized_type(
        self, parent: object | type[Any], relation_name: str
    ) -> type[Any]:
        parent_cls = parent if isinstance(parent, type) else type(parent)

        explicit = self._relations.get((parent_cls, relation_name))
        if explicit is not None:
            return explicit

        fields = getattr(parent_cls, "model_fields", {})
        field_info = fields.get(relation_name)
        if field_info is None:
            raise RelationNotFoundError(parent_cls, relation_name)

        target = _relation_target(field_info.annotation)
        if target is None or not (
            self.is_bound(target) or issubclass(target, BaseModel)
        ):
            raise RelationNotFoundError(parent_cls, relation_name)
        return target

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._entities.clear()
        self._relations.clear()
