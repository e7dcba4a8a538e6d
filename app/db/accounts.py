from typing import Any

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

metadata = MetaData()

accounts = Table(
    "accounts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(100), nullable=False),
    Column("email", String(100), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("phone", String(20), nullable=True),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
)


class DuplicateEmail(Exception):
    pass


class AccountRepository:
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def email_exists(self, email: str) -> bool:
        query = select(accounts.c.id).where(accounts.c.email == email).limit(1)
        async with self.engine.connect() as conn:
            row = (await conn.execute(query)).first()
        return row is not None

    async def get_by_email(self, email: str) -> dict[str, Any] | None:
        query = select(accounts).where(accounts.c.email == email).limit(1)
        async with self.engine.connect() as conn:
            row = (await conn.execute(query)).mappings().first()
        return dict(row) if row else None

    async def create(self, username: str, email: str, password_hash: str, phone: str | None = None) -> int:
        statement = insert(accounts).values(
            username=username,
            email=email,
            password_hash=password_hash,
            phone=phone,
        )
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement)
        except IntegrityError as exc:
            # the unique index, not the earlier lookup, decides who wins a race
            raise DuplicateEmail(email) from exc
        return int(result.inserted_primary_key[0])

    async def count(self) -> int:
        async with self.engine.connect() as conn:
            return int((await conn.execute(select(func.count()).select_from(accounts))).scalar_one())
