"""Member ORM: one row per Member record.

Invariants:
    - company_id is a weak reference (no FK): a company can be removed out of band
    - company_name is denormalized and written together with company_id
    - email / tax_id indexed for credential lookups
"""

from sqlalchemy import String, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from copejem.db.base import Base


class MemberRow(Base):
    __tablename__ = "members"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    company_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    company_name: Mapped[str] = mapped_column(
        String(200), nullable=False, default="",
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    tax_id: Mapped[str | None] = mapped_column(
        String(32), nullable=True, index=True,
    )
    password: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_admin: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    status: Mapped[str] = mapped_column(
        String(10), nullable=False, default="active",
    )
    admission_year: Mapped[int] = mapped_column(Integer, nullable=False)
    exit_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
