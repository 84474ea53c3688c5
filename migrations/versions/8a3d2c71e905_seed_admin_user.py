"""seed roles and admin user

Revision ID: 8a3d2c71e905
Revises: 1fbe8b4c1564
Create Date: 2025-10-02 09:40:12.007311+00:00

"""
import os
import uuid
from typing import Sequence, Union

from alembic import op
from sqlalchemy import text

from app.core.security import hash_password


# revision identifiers, used by Alembic.
revision: str = '8a3d2c71e905'
down_revision: Union[str, Sequence[str], None] = '1fbe8b4c1564'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "ChangeMe123!")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin")


def _ensure_role(conn, name: str) -> uuid.UUID:
    role_id = conn.execute(text("SELECT id FROM roles WHERE name = :name"), {"name": name}).scalar()
    if role_id is None:
        role_id = uuid.uuid4()
        conn.execute(
            text("INSERT INTO roles (id, name, created_at) VALUES (:id, :name, now())"),
            {"id": role_id, "name": name},
        )
    return role_id


def upgrade() -> None:
    conn = op.get_bind()

    admin_role_id = _ensure_role(conn, "admin")
    _ensure_role(conn, "user")

    user_id = conn.execute(text("SELECT id FROM users WHERE email = :email"), {"email": ADMIN_EMAIL}).scalar()
    if user_id is None:
        user_id = uuid.uuid4()
        conn.execute(
            text(
                "INSERT INTO users (id, email, password_hash, display_name, is_active, created_at) "
                "VALUES (:id, :email, :password_hash, :display_name, true, now())"
            ),
            {
                "id": user_id,
                "email": ADMIN_EMAIL,
                "password_hash": hash_password(ADMIN_PASSWORD),
                "display_name": ADMIN_NAME,
            },
        )

    conn.execute(
        text(
            "INSERT INTO user_roles (user_id, role_id) VALUES (:user_id, :role_id) "
            "ON CONFLICT (user_id, role_id) DO NOTHING"
        ),
        {"user_id": user_id, "role_id": admin_role_id},
    )


def downgrade() -> None:
    conn = op.get_bind()
    user_id = conn.execute(text("SELECT id FROM users WHERE email = :email"), {"email": ADMIN_EMAIL}).scalar()
    if user_id is not None:
        conn.execute(text("DELETE FROM user_roles WHERE user_id = :id"), {"id": user_id})
        conn.execute(text("DELETE FROM users WHERE id = :id"), {"id": user_id})
