"""
Servicio de autenticación y sesión del Sistema de Inventario.
"""
import logging
import os
from typing import Optional

import bcrypt
import streamlit as st
from sqlalchemy.orm import Session

from config.database import SessionLocal
from models.user import User

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_EMAIL = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@inventario.local")
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")


class AuthService:
    """
    Gestiona autenticación, sesión y roles básicos.
    """

    @staticmethod
    def hash_password(password: str) -> str:
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> Optional[User]:
        user = (
            db.query(User)
            .filter(User.email == email.strip().lower(), User.active.is_(True))
            .first()
        )
        if user and AuthService.verify_password(password, user.password_hash):
            return user
        return None

    @staticmethod
    def create_user(
        db: Session,
        email: str,
        password: str,
        role: str = "operador",
        name: Optional[str] = None,
    ) -> User:
        user = User(
            email=email.strip().lower(),
            name=name,
            password_hash=AuthService.hash_password(password),
            role=role,
            active=True,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    # ----- Sesión -----

    @staticmethod
    def init_session_state() -> None:
        if "authenticated" not in st.session_state:
            st.session_state.authenticated = False
        if "user" not in st.session_state:
            st.session_state.user = None

    @staticmethod
    def login(user: User) -> None:
        st.session_state.authenticated = True
        st.session_state.user = {
            "id": user.id,
            "email": user.email,
            "name": user.name,
            "role": user.role,
        }

    @staticmethod
    def logout() -> None:
        st.session_state.authenticated = False
        st.session_state.user = None
        st.session_state.pop("dashboard", None)

    @staticmethod
    def is_authenticated() -> bool:
        return st.session_state.get("authenticated", False)

    @staticmethod
    def get_current_user() -> Optional[dict]:
        return st.session_state.get("user")

    @staticmethod
    def current_email() -> str:
        user = AuthService.get_current_user()
        return (user or {}).get("email") or ""


def ensure_default_admin(session_factory=SessionLocal) -> None:
    """
    Garantiza la existencia de un usuario admin por defecto.
    Se ejecuta al iniciar la aplicación.
    """
    db = session_factory()
    try:
        admin = db.query(User).filter(User.role == "admin").first()
        if not admin:
            AuthService.create_user(
                db=db,
                email=DEFAULT_ADMIN_EMAIL,
                password=DEFAULT_ADMIN_PASSWORD,
                role="admin",
                name="Administrador",
            )
            logger.warning(
                "Usuario admin creado: %s (cambia la contraseña en producción)",
                DEFAULT_ADMIN_EMAIL,
            )
    finally:
        db.close()
