"""Conexão com o banco de dados"""
from os import getenv
from typing import Optional
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_database_url() -> str:
    """Tenta obter USUARIO_DATABASE_URL, depois DATABASE_URL. Lança exceção se ambos forem None."""
    usuario_url = getenv("USUARIO_DATABASE_URL")
    if usuario_url:
        return usuario_url

    default_url = getenv("DATABASE_URL")
    if default_url:
        return default_url

    raise RuntimeError("Nenhuma URL de banco de dados encontrada nas variáveis de ambiente.")


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        echo = getenv("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")
        _engine = create_engine(get_database_url(), echo=echo)
    return _engine


def SessionLocal():
    """Abre uma nova sessão no banco configurado."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _session_factory()
