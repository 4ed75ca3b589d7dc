import logging
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session

from errors import StorageInitError
from model.character_record import CharacterRecord
from model.demo_record import DemoRecord

logger = logging.getLogger(__name__)

MEMORY_PATH = ':memory:'

# tables created when a store is bootstrapped for the first time
SCHEMA_TABLES = [DemoRecord.__table__, CharacterRecord.__table__]


def name_combiner(base, name: str) -> str:
    """Join ``base`` and ``name`` into one file path, replacing spaces with underscores."""
    return f'{base}{name}'.replace(' ', '_')


def _create_engine(url: str):
    # StaticPool keeps exactly one DBAPI connection for the life of the engine
    return create_engine(
        url,
        poolclass=StaticPool,
        connect_args={'check_same_thread': False},
    )


class Database:
    """
    Handle on a single SQLite connection.

    Use Database.init rather than the constructor.
    """

    def __init__(self, engine, path, created: bool):
        self.engine = engine
        self.path = path
        self.created = created

    @classmethod
    def init(cls, path) -> 'Database':
        """
        Open the store at ``path``, creating it with the schema when absent.

        An existing file is opened as is and its schema is never touched.
        Raises StorageInitError when the file or its directory cannot be
        created, or when SQLite refuses to open it.
        """
        if str(path) == MEMORY_PATH:
            return cls._bootstrap('sqlite://', MEMORY_PATH, existed=False)

        path = Path(path)

        try:
            existed = path.exists()
            if not existed:
                path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageInitError(f'storage initialization failed for {path}: {e}') from e

        return cls._bootstrap(f'sqlite:///{path}', path, existed=existed)

    @classmethod
    def init_for_name(cls, base, name: str) -> 'Database':
        """Open the store dedicated to one user or character, e.g. ``saves/Veteran_Investigator.db``."""
        return cls.init(name_combiner(base, name))

    @classmethod
    def _bootstrap(cls, url: str, path, existed: bool) -> 'Database':
        engine = None
        try:
            engine = _create_engine(url)

            with engine.connect() as connection:
                # reads the header, so a file that is not a database fails here
                connection.exec_driver_sql('PRAGMA schema_version')

            if existed:
                logger.info('Opening existing database at %s', path)
            else:
                logger.info('Creating new database at %s', path)
                SQLModel.metadata.create_all(engine, tables=SCHEMA_TABLES)
                logger.info('Tables created: %s', ', '.join(table.name for table in SCHEMA_TABLES))

        except SQLAlchemyError as e:
            if engine is not None:
                engine.dispose()
            if not existed and path != MEMORY_PATH:
                _remove_partial_file(path)
            raise StorageInitError(f'storage initialization failed for {path}: {e}') from e

        return cls(engine, path, created=not existed)

    @contextmanager
    def session(self):
        with Session(self.engine) as session:
            yield session

    def table_names(self) -> list:
        return inspect(self.engine).get_table_names()

    def close(self):
        self.engine.dispose()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def _remove_partial_file(path: Path):
    try:
        if path.is_file():
            path.unlink()
            logger.warning('Removed partially created database at %s', path)
    except OSError as e:
        raise StorageInitError(f'storage initialization failed for {path}: {e}') from e
