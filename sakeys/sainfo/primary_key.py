""" Primary key metadata: which attributes make the primary key of a model """

from __future__ import annotations

import dataclasses
import logging
from collections import abc
from typing import Optional

import sqlalchemy as sa
import sqlalchemy.orm

from sakeys.sainfo.names import model_name
from sakeys.typing import SAModel

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class KeyProperty:
    """ A primary key attribute of a model """
    # Name of the mapped attribute. May differ from the column name!
    name: str

    # The class whose mapper declares the attribute
    owner: SAModel

    # The underlying column.
    # Columns overload `==` to build SQL expressions, so they cannot take part in comparisons
    column: sa.sql.ColumnElement = dataclasses.field(compare=False, repr=False)


# A function that gets primary key properties for a model
KeyLookupFunction = abc.Callable[[SAModel], abc.Sequence[KeyProperty]]


def find_primary_key_properties(Model: SAModel, registry: Optional[sa.orm.registry] = None) -> tuple[KeyProperty, ...]:
    """ Get the list of primary key properties from the mapper, in primary key order

    Args:
        Model: the mapped class
        registry: the registry to look the class up in. Default: the class' own mapper, whatever registry it belongs to

    Raises:
        sa.orm.exc.UnmappedClassError: the class is not mapped (or not mapped by this registry)
    """
    mapper = _find_mapper(Model, registry)

    return tuple(
        _key_property(mapper, column)
        for column in mapper.primary_key
    )


def _key_property(mapper: sa.orm.Mapper, column: sa.sql.ColumnElement) -> KeyProperty:
    prop = mapper.get_property_by_column(column)
    return KeyProperty(name=prop.key, owner=prop.parent.class_, column=column)


def _find_mapper(Model: SAModel, registry: Optional[sa.orm.registry]) -> sa.orm.Mapper:
    # No registry? Use the global lookup
    if registry is None:
        return sa.orm.class_mapper(Model)

    # Registry: the class has to be one of its mappers
    for mapper in registry.mappers:
        if mapper.class_ is Model:
            return mapper
    raise sa.orm.exc.UnmappedClassError(Model)


class KeyPropertyCache:
    """ Memoized primary key properties, per model

    Entries are computed lazily, when a model is requested for the first time, and never change afterwards.

    The cache is safe to use from multiple threads without locking:
    when two threads compute the same entry concurrently, both computations run,
    but the first one stored wins, and every caller gets the very same tuple.

    Example:
        cache = KeyPropertyCache()
        cache.get(User)
        => (KeyProperty(name='id', owner=User),)
    """

    def __init__(self, lookup: KeyLookupFunction = find_primary_key_properties):
        """

        Args:
            lookup: The function that reads primary key properties from the schema metadata.
                Only called for models that are not cached yet.
        """
        self.lookup = lookup
        self._entries: dict[SAModel, tuple[KeyProperty, ...]] = {}

    def get(self, Model: SAModel) -> tuple[KeyProperty, ...]:
        """ Get primary key properties of a model; compute them if not cached yet """
        try:
            return self._entries[Model]
        except KeyError:
            pass

        # Compute. May raise: not our business to handle schema errors
        key_properties = tuple(self.lookup(Model))

        # setdefault() is atomic: the first writer wins
        stored = self._entries.setdefault(Model, key_properties)
        if stored is key_properties:
            logger.debug('Cached primary key of %s: %s', model_name(Model), [prop.name for prop in stored])
        return stored

    def __contains__(self, Model: SAModel) -> bool:
        return Model in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f'{type(self).__name__}({", ".join(model_name(Model) for Model in self._entries)})'


# Process-wide cache
default_cache = KeyPropertyCache()


def primary_key_properties(Model: SAModel) -> tuple[KeyProperty, ...]:
    """ Get the primary key properties of a model, using the process-wide cache """
    return default_cache.get(Model)


def primary_key_names(Model: SAModel) -> tuple[str, ...]:
    """ Get the list of primary key attribute names """
    return tuple(prop.name for prop in primary_key_properties(Model))
