# hacklog/db/init_db.py
import logging
from hacklog.db.session import engine
from hacklog.db.base import Base

# 👇 importa todos los modelos que deben existir en la DB
from hacklog.users.models import User  # noqa: F401
from hacklog.projects.models import Project  # noqa: F401

log = logging.getLogger("uvicorn")


async def init_models():
    """
    Crea/verifica las tablas declaradas en Base.metadata.
    En producción el esquema lo manejan las migraciones de alembic.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        log.info("✅ DB init: tablas creadas/verificadas.")
    except Exception as e:
        log.error(f"❌ DB init falló: {e!r}")
        raise
