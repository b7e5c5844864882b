import logging
import re
from typing import List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.dialects import mysql, sqlite
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateIndex, CreateTable, DropTable

from app.config import Settings, settings as default_settings
from app.models.post import Post

logger = logging.getLogger(__name__)

MYSQL_BACKENDS = ("mysql", "mariadb")
DIALECTS = {
    "mysql": mysql.dialect,
    "sqlite": sqlite.dialect,
}

_OPTION_PATTERN = re.compile(r"^\w+$")


def _check_option(name: str, value: str) -> str:
    if not _OPTION_PATTERN.match(value or ""):
        raise ValueError(f"Invalid {name}: {value!r}")
    return value


def create_database(engine: Engine, name: str, charset: str, collation: str) -> bool:
    # other backends have no separate database to create
    if engine.dialect.name not in MYSQL_BACKENDS:
        logger.info("Skipping CREATE DATABASE on %s", engine.dialect.name)
        return False

    quoted = engine.dialect.identifier_preparer.quote(name)
    statement = (
        f"CREATE DATABASE IF NOT EXISTS {quoted} "
        f"CHARACTER SET {_check_option('charset', charset)} "
        f"COLLATE {_check_option('collation', collation)}"
    )
    logger.info("Creating database %s", name)
    with engine.begin() as conn:
        conn.execute(text(statement))
    return True


def drop_posts_table(engine: Engine):
    logger.info("Dropping table %s if it exists", Post.__tablename__)
    with engine.begin() as conn:
        conn.execute(DropTable(Post.__table__, if_exists=True))


def create_posts_table(engine: Engine):
    logger.info("Creating table %s", Post.__tablename__)
    Post.__table__.create(bind=engine)


def reset_posts_table(engine: Engine):
    drop_posts_table(engine)
    create_posts_table(engine)


def provision(settings: Optional[Settings] = None, create_db: bool = True) -> Engine:
    # caller owns the returned engine and disposes it
    settings = settings or default_settings
    url = make_url(settings.DATABASE_URL)

    try:
        if create_db and url.database and url.get_backend_name() in MYSQL_BACKENDS:
            server_engine = create_engine(url.set(database=None))
            try:
                create_database(server_engine, url.database,
                                settings.DB_CHARSET, settings.DB_COLLATION)
            finally:
                server_engine.dispose()

        engine = create_engine(url)
        reset_posts_table(engine)
    except SQLAlchemyError:
        logger.exception("Provisioning %s failed", url.render_as_string(hide_password=True))
        raise

    logger.info("Provisioned %s", url.render_as_string(hide_password=True))
    return engine


def render_ddl(dialect_name: str = "mysql", settings: Optional[Settings] = None) -> str:
    if dialect_name not in DIALECTS:
        raise ValueError(f"Unsupported dialect: {dialect_name}")
    settings = settings or default_settings
    dialect = DIALECTS[dialect_name]()
    table = Post.__table__

    statements: List[str] = []
    database = make_url(settings.DATABASE_URL).database
    if dialect_name == "mysql" and database:
        quoted = dialect.identifier_preparer.quote(database)
        statements.append(
            f"CREATE DATABASE IF NOT EXISTS {quoted} "
            f"CHARACTER SET {_check_option('charset', settings.DB_CHARSET)} "
            f"COLLATE {_check_option('collation', settings.DB_COLLATION)}"
        )
        statements.append(f"USE {quoted}")

    statements.append(str(DropTable(table, if_exists=True).compile(dialect=dialect)))
    statements.append(str(CreateTable(table).compile(dialect=dialect)))
    for index in sorted(table.indexes, key=lambda i: i.name):
        statements.append(str(CreateIndex(index).compile(dialect=dialect)))

    return "\n".join(s.strip() + ";" for s in statements) + "\n"
