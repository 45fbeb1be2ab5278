"""
Identifier lookup strategies.

Historical records are keyed inconsistently: some only by the native
``_id``, some by a string ``id``, some by ``userId`` / ``username`` /
``playerId``. A lookup is therefore an ordered list of strategies, tried one
after another until a document matches. A value that cannot be converted for
a strategy (e.g. a non-hex string for ``_id``) just skips that strategy.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection


class Skip(Exception):
    """Raised by a converter when the value does not fit the strategy."""


def to_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        raise Skip() from None


def to_str(value: Any) -> str:
    if value is None:
        raise Skip()
    return str(value)


def to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise Skip() from None


@dataclass(frozen=True)
class LookupStrategy:
    field: str
    convert: Callable[[Any], Any] = to_str

    def condition(self, value: Any) -> Optional[dict]:
        try:
            return {self.field: self.convert(value)}
        except Skip:
            return None

    def conditions_for(self, values: Iterable[Any]) -> Optional[dict]:
        converted = []
        for value in values:
            try:
                converted.append(self.convert(value))
            except Skip:
                continue
        if not converted:
            return None
        return {self.field: {"$in": converted}}


NATIVE_ID = LookupStrategy("_id", to_object_id)
STRING_ID = LookupStrategy("id")
# Older session documents carry a numeric id
NUMERIC_ID = LookupStrategy("id", to_int)


def by_fields(*fields: str) -> tuple[LookupStrategy, ...]:
    return tuple(LookupStrategy(field) for field in fields)


def resolve(collection: Collection, value: Any, strategies: Sequence[LookupStrategy],
            extra_filter: Optional[dict] = None) -> Optional[dict]:
    """Return the first document matched by the strategies, in order."""
    for strategy in strategies:
        condition = strategy.condition(value)
        if condition is None:
            continue
        query = {**condition, **(extra_filter or {})}
        doc = collection.find_one(query)
        if doc is not None:
            return doc
    return None


def ids_filter(values: Iterable[Any], strategies: Sequence[LookupStrategy]) -> Optional[dict]:
    """Disjunctive filter matching any of ``values`` under any strategy."""
    values = list(values)
    conditions = [c for c in (s.conditions_for(values) for s in strategies) if c is not None]
    if not conditions:
        return None
    if len(conditions) == 1:
        return conditions[0]
    return {"$or": conditions}
