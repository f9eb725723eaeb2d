__version__ = __import__('importlib.metadata').metadata.version('sakeys')

from .keys import KeyInspector
from .keys import key_values_as_string, key_values_of, key_of, single_key_of
from .keys import entity_key_of, entity_single_key_of
from .settings import KeyFormat

from .sainfo.primary_key import KeyProperty, KeyPropertyCache
from .sainfo.primary_key import primary_key_properties, primary_key_names, find_primary_key_properties
from .sainfo.entries import session_entry, entry_entity, entry_value, property_value

from . import exc
