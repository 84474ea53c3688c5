import uuid
from datetime import datetime
from typing import List
from sqlalchemy import String, DateTime, Boolean, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.core.database.base import Base
from .role import user_roles  # association only; no Role import to avoid circular typing

class User(Base):
    __tablename__ = "users"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    roles: Mapped[List["Role"]] = relationship("Role", lazy="selectin", secondary=user_roles, back_populates="users")

    @property
    def role_names(self) -> list[str]:
        return [r.name.value for r in self.roles]

    @property
    def is_admin(self) -> bool:
        return "admin" in self.role_names
