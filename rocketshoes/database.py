# rocketshoes/database.py
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

# Local SQLite file by default; any SQLAlchemy URL works (postgresql://..., sqlite://)
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./rocketshoes.db")

engine = create_engine(DATABASE_URL, echo=os.environ.get("SQL_ECHO", "0") == "1", future=True)

session_maker = sessionmaker(engine, expire_on_commit=False, class_=Session)

Base = declarative_base()


def create_tables(bind=None) -> None:
    # import registers the tables on Base.metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(bind or engine)
