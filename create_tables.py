# create_tables.py
# Drops and recreates every table. Use alembic for anything that holds real data.
import logging

from app.config.settings import Settings
from app.database import Base, build_engine
from app.models import Task, User  # noqa: F401

logger = logging.getLogger(__name__)

def create_tables(settings: Settings):
    """Drop and recreate all tables"""
    engine = build_engine(settings)
    try:
        # tasks references users, drop_all orders it
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        logger.info("✅ All tables created successfully!")
    finally:
        engine.dispose()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables(Settings.from_env())
