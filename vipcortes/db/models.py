"""SQLAlchemy models mirroring the JSON collections kept in FILE mode.

Every table asks SQLite for AUTOINCREMENT so ids of deleted rows are never
handed out again, matching MySQL AUTO_INCREMENT.
"""
from __future__ import annotations

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Integer,
    String,
    Text,
    Time,
)

from .session import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=True)
    password = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=True)


class Profile(Base):
    """Simplified registration (name/phone/birth date) used by the loyalty card page."""

    __tablename__ = "profiles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(100), nullable=False)
    telefone = Column(String(20), nullable=True)
    nascimento = Column(String(20), nullable=True)
    senha = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=True)


class Appointment(Base):
    __tablename__ = "agendamentos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=True)
    phone = Column(String(20), nullable=True)
    service = Column(String(100), nullable=True)
    data_agendamento = Column(Date, nullable=True)
    hora = Column(Time, nullable=True)
    observacoes = Column(Text, nullable=True)
    usuario_id = Column(Integer, nullable=True, index=True)


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    author_name = Column(String(100), nullable=True)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=True)


class LoyaltyAccount(Base):
    __tablename__ = "fidelidades"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    usuario_id = Column(Integer, nullable=True, index=True)
    pontos = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="ativo")
