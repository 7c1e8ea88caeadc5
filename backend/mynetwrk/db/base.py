from sqlalchemy.engine import Engine
from mynetwrk.models.base import Base


def _import_models() -> None:
    """Import all models so their metadata is registered on Base."""
    import mynetwrk.models.user          # noqa: F401
    import mynetwrk.models.timezone      # noqa: F401
    import mynetwrk.models.group         # noqa: F401
    import mynetwrk.models.contact       # noqa: F401
    import mynetwrk.models.interaction   # noqa: F401


def create_all(engine: Engine) -> None:
    """Create all tables for the registered models (SYNC)."""
    _import_models()
    Base.metadata.create_all(bind=engine)
