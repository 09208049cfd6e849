from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from config.database import Base


class User(Base):
    """
    Usuarios del almacén.
    Roles soportados (role):
    - admin
    - supervisor
    - operador
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="operador")
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc).replace(tzinfo=None)
    )
