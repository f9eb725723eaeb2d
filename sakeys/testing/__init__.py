""" Tools for testing """

from .recreate_tables import created_tables, create_tables, drop_tables
from .query_logger import QueryCounter, ExpectedQueryCounter
