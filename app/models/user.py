"""ORM model for application users (auth and review roles)."""

from sqlalchemy import CheckConstraint, Column, Integer, String

from app.models.base import Base, TimestampMixin

USER_ROLES = ("admin", "user", "ceo")


class User(TimestampMixin, Base):
    """
    User account for JWT authentication.

    role: 'admin', 'user' or 'ceo'. The CEO role writes ceo_comment on
    investment project reviews; every other role writes pm_comment.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ('admin', 'user', 'ceo')",
            name="users_role_check",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default="user", server_default="user")
    station_code = Column(String(50), nullable=True)
