""" Primary key values of entities: read, format """

from __future__ import annotations

from typing import Any, Optional, TypeVar, overload

import sqlalchemy as sa
import sqlalchemy.orm

from sakeys import exc
from sakeys.settings import KeyFormat
from sakeys.sainfo.entries import as_entry, entry_entity, session_entry, entry_value, property_value
from sakeys.sainfo.names import model_name
from sakeys.sainfo.primary_key import KeyPropertyCache, KeyProperty, default_cache
from sakeys.typing import SAModel, SAInstance, SAEntryOrInstance

T = TypeVar('T')


class KeyInspector:
    """ Get primary key values of entities

    Example:
        keys = KeyInspector()

        keys.key_of(sa.inspect(user))
        => (1,)
        keys.key_values_as_string(sa.inspect(line))
        => '(order_id)=[1]; (line_no)=[2]'

    All methods fail with `exc.ArgumentMissingError` when given a None, before looking at any metadata.
    Entries whose entity has been garbage-collected fail with `exc.EntityGoneError`, also before any metadata lookup.
    Errors from SqlAlchemy (e.g. an unmapped class) are not handled.
    """

    def __init__(self, cache: Optional[KeyPropertyCache] = None, key_format: Optional[KeyFormat] = None):
        """

        Args:
            cache: Primary key properties cache. Default: the process-wide cache
            key_format: How to render keys as strings
        """
        self.cache = cache if cache is not None else default_cache
        self.key_format = key_format or KeyFormat()

    def key_properties(self, Model: SAModel) -> tuple[KeyProperty, ...]:
        """ Get primary key properties of a model """
        return self.cache.get(Model)

    # region: Entries

    def key_values_as_string(self, entry: SAEntryOrInstance) -> str:
        """ Get key values as a string: "(name)=[value]; (name)=[value]"

        Args:
            entry: Change-tracking entry of the entity (or the entity itself)
        """
        if entry is None:
            raise exc.ArgumentMissingError('entry')

        return self.key_format.format(self.key_values_of(entry))

    def key_values_of(self, entry: SAEntryOrInstance) -> list[tuple[str, Any]]:
        """ Get (name, value) pairs for every primary key attribute

        Values are read through the entry, so pending in-memory changes are reported.

        Args:
            entry: Change-tracking entry of the entity (or the entity itself)
        """
        if entry is None:
            raise exc.ArgumentMissingError('entry')

        state = as_entry(entry)
        entry_entity(state)
        return [
            (prop.name, entry_value(state, prop.name))
            for prop in self.key_properties(state.class_)
        ]

    def key_of(self, entry: SAEntryOrInstance) -> tuple:
        """ Get primary key values of the entity

        Values are read off the instance itself. An attribute that's not there gives None.

        Args:
            entry: Change-tracking entry of the entity (or the entity itself)
        """
        if entry is None:
            raise exc.ArgumentMissingError('entry')

        state = as_entry(entry)
        entity = entry_entity(state)
        return tuple(
            property_value(entity, prop.name)
            for prop in self.key_properties(state.class_)
        )

    @overload
    def single_key_of(self, entry: SAEntryOrInstance) -> Any: ...

    @overload
    def single_key_of(self, entry: SAEntryOrInstance, type_: type[T]) -> T: ...

    def single_key_of(self, entry, type_=None):
        """ Get the value of the primary key. The key must have exactly one part.

        Args:
            entry: Change-tracking entry of the entity (or the entity itself)
            type_: Expected type of the value. None values are let through.

        Raises:
            exc.CompositeKeyError: the key does not have exactly one part
            exc.KeyTypeError: the value is not of the expected type
        """
        if entry is None:
            raise exc.ArgumentMissingError('entry')

        state = as_entry(entry)
        return _single_key(state.class_, self.key_of(state), type_)

    # endregion

    # region: Entities within a Session

    def entity_key_of(self, session: sa.orm.Session, entity: SAInstance) -> tuple:
        """ Get primary key values of an entity that belongs to a Session

        Args:
            session: The session the entity belongs to
            entity: The entity
        """
        if entity is None:
            raise exc.ArgumentMissingError('entity')
        if session is None:
            raise exc.ArgumentMissingError('session')

        return self.key_of(session_entry(session, entity))

    @overload
    def entity_single_key_of(self, session: sa.orm.Session, entity: SAInstance) -> Any: ...

    @overload
    def entity_single_key_of(self, session: sa.orm.Session, entity: SAInstance, type_: type[T]) -> T: ...

    def entity_single_key_of(self, session, entity, type_=None):
        """ Get the value of the primary key of an entity that belongs to a Session. The key must have exactly one part.

        Raises:
            exc.CompositeKeyError: the key does not have exactly one part
            exc.KeyTypeError: the value is not of the expected type
        """
        if entity is None:
            raise exc.ArgumentMissingError('entity')

        key_parts = self.entity_key_of(session, entity)
        return _single_key(type(entity), key_parts, type_)

    # endregion


def _single_key(Model: SAModel, key_parts: tuple, type_: Optional[type]):
    """ Get the one and only key part """
    # Empty keys are not possible with a mapper, but a custom lookup may give one
    if len(key_parts) != 1:
        raise exc.CompositeKeyError(model_name(Model), len(key_parts))

    value = key_parts[0]
    if type_ is not None and value is not None and not isinstance(value, type_):
        raise exc.KeyTypeError(model_name(Model), value, type_)

    return value


# Process-wide inspector
default_inspector = KeyInspector()


def key_values_as_string(entry: SAEntryOrInstance) -> str:
    """ Get key values as a string: "(name)=[value]; (name)=[value]" """
    return default_inspector.key_values_as_string(entry)


def key_values_of(entry: SAEntryOrInstance) -> list[tuple[str, Any]]:
    """ Get (name, value) pairs for every primary key attribute, read through the entry """
    return default_inspector.key_values_of(entry)


def key_of(entry: SAEntryOrInstance) -> tuple:
    """ Get primary key values, read off the instance """
    return default_inspector.key_of(entry)


@overload
def single_key_of(entry: SAEntryOrInstance) -> Any: ...

@overload
def single_key_of(entry: SAEntryOrInstance, type_: type[T]) -> T: ...

def single_key_of(entry, type_=None):
    """ Get the value of a single-part primary key """
    return default_inspector.single_key_of(entry, type_)


def entity_key_of(session: sa.orm.Session, entity: SAInstance) -> tuple:
    """ Get primary key values of an entity within a Session """
    return default_inspector.entity_key_of(session, entity)


@overload
def entity_single_key_of(session: sa.orm.Session, entity: SAInstance) -> Any: ...

@overload
def entity_single_key_of(session: sa.orm.Session, entity: SAInstance, type_: type[T]) -> T: ...

def entity_single_key_of(session, entity, type_=None):
    """ Get the value of a single-part primary key of an entity within a Session """
    return default_inspector.entity_single_key_of(session, entity, type_)
