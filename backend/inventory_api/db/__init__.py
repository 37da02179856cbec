from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from inventory_api.config import settings
from inventory_api.utils.logger import get_logger

log = get_logger("db")

DATABASE_URL = settings.DATABASE_URL


def _make_engine(url: str):
    """
    SQLite needs check_same_thread disabled because FastAPI runs sync
    endpoints in a threadpool. An in-memory database lives on one
    connection, so every session must share it (StaticPool).
    """
    kwargs = {"future": True, "echo": False}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = _make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(reset: bool = False, seed: bool = None):
    """
    Initialize DB schema.

    Behavior:
      - reset=True drops and recreates the products table.
      - When seeding is enabled (settings.SEED_SAMPLE_DATA unless `seed` is
        given) and the table is empty, the sample products are inserted.
    """
    # models must be imported so metadata is populated
    from inventory_api.models.product import Product  # noqa: F401
    from inventory_api.seed import seed_sample_products

    if reset:
        log.info("Resetting database...")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database initialized at %s", engine.url.render_as_string(hide_password=True))

    if seed is None:
        seed = settings.SEED_SAMPLE_DATA
    if seed:
        s = SessionLocal()
        try:
            created = seed_sample_products(s)
            if created:
                log.info("Seeded %d sample products.", created)
        finally:
            s.close()


def ping() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        log.exception("Database ping failed")
        return False


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
