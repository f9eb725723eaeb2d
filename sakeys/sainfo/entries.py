""" Change-tracking entries: SqlAlchemy instance states """

import logging
from typing import Any, cast

import sqlalchemy as sa
import sqlalchemy.orm

from sakeys import exc
from sakeys.sainfo.names import model_name
from sakeys.typing import SAInstance, SAInstanceState, SAEntryOrInstance

logger = logging.getLogger(__name__)


def as_entry(entry: SAEntryOrInstance) -> SAInstanceState:
    """ Get the change-tracking entry: given an entry already, or an instance to inspect

    Raises:
        sa.exc.NoInspectionAvailable: not a mapped instance
    """
    if isinstance(entry, SAInstanceState):
        return entry
    return cast(SAInstanceState, sa.inspect(entry))


def entry_entity(entry: SAInstanceState) -> SAInstance:
    """ Get the entity of an entry

    Entries only keep a weak reference to their entity.

    Raises:
        exc.EntityGoneError: the entity has been garbage-collected
    """
    entity = entry.obj()
    if entity is None:
        raise exc.EntityGoneError(model_name(entry.class_))
    return entity


def session_entry(session: sa.orm.Session, entity: SAInstance) -> SAInstanceState:
    """ Get the change-tracking entry of an entity within a Session

    Entities that the session does not track (transient, detached, or owned by another session)
    still have an entry: it just isn't the session's.
    """
    entry = cast(SAInstanceState, sa.inspect(entity))

    if entry.session is not session:
        logger.debug('%s is not tracked by the session: %s', model_name(entry.class_), _entry_status(entry))

    return entry


def entry_value(entry: SAInstanceState, name: str) -> Any:
    """ Get the current value of an attribute, through the entry

    Unlike reading the instance, this goes through the attribute instrumentation:
    the value reflects pending in-memory changes, and unloaded attributes get loaded.

    Raises:
        KeyError: no such attribute
        exc.EntityGoneError: the entity has been garbage-collected
    """
    _check_name(name)
    entry_entity(entry)  # a collected entity would give the class attribute instead
    return entry.attrs[name].value


def property_value(entity: SAInstance, name: str) -> Any:
    """ Get the value of an attribute, directly off the instance

    A missing attribute gives None
    """
    if entity is None:
        raise exc.ArgumentMissingError('entity')
    _check_name(name)

    return getattr(entity, name, None)


def _check_name(name: str):
    if name is None:
        raise exc.ArgumentMissingError('name')
    if not name:
        raise exc.ArgumentMissingError('name', 'must have value')


def _entry_status(entry: SAInstanceState) -> str:
    for status in ('transient', 'pending', 'persistent', 'deleted', 'detached'):
        if getattr(entry, status):
            return status
    return 'unknown'
