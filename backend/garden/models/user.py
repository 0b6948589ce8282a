"""
Community Garden Backend — User SQLAlchemy Model
=================================================

What:  ORM model representing the `users` table (garden accounts).
Why:   The account shape is part of the schema even though nothing uses it yet.
Who:   Only Database.create_schema() touches it. No route, service or
       repository reads or writes users; access control uses the static
       ADMIN_USERNAME / ADMIN_PASSWORD pair from settings instead.

Constraints:
    - username: required, unique
    - password: required, stored in plain form (no hashing is applied)
    - email:    required, unique
    - role:     optional free text
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from garden.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    role: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        """Never includes the password."""
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
