import os
import pytest
import sqlalchemy as sa
import sqlalchemy.orm

from sakeys.sainfo.version import SA_14
from sakeys.testing import created_tables

from .util.models import Base


@pytest.fixture(scope='function')
def engine() -> sa.engine.Engine:
    return sa.create_engine(
        DATABASE_URL,
        # SA 1.4: 2.0 forward compatibility
        **(dict(future=True) if SA_14 else {}),
    )


@pytest.fixture(scope='function')
def ssn(engine: sa.engine.Engine) -> sa.orm.Session:
    """ A Session with all test tables created """
    with created_tables(engine, Base):
        with sa.orm.Session(bind=engine, **(dict(future=True) if SA_14 else {})) as ssn:
            yield ssn


# URL of the database to connect to
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite://')
