""" SqlAlchemy version tools """

from sqlalchemy import __version__ as SA_VERSION

# SqlAlchemy version tuple. Pre-releases ("2.1.0b1") keep only the numeric parts
SA_VERSION_TUPLE: tuple[int, ...] = tuple(int(part) for part in SA_VERSION.split('.')[:3] if part.isdigit())

# SqlAlchemy minor version: 1.X or 2.X
SA_VERSION_MINOR: tuple[int, int] = SA_VERSION_TUPLE[:2]  # type: ignore

# SqlAlchemy version bools
SA_14 = SA_VERSION_MINOR == (1, 4)
SA_20 = SA_VERSION_MINOR >= (2, 0)
