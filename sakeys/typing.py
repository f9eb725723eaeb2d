from typing import Union

from sqlalchemy.orm.state import InstanceState


# Annotation for SqlAlchemy models
SAModel = type

# Annotation for SqlAlchemy instances (objects)
SAInstance = object

# Change-tracking entry of an instance: what you get with `sa.inspect(instance)`
SAInstanceState = InstanceState

# Entry operations accept either the entry itself, or the instance to inspect
SAEntryOrInstance = Union[SAInstanceState, SAInstance]
