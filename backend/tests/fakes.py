"""
In-memory stand-in for the Supabase async client.

Supports the subset of the query builder and auth admin API the
repositories use: select/insert/update/delete with eq filters, order and
limit, plus user lookup, creation and deletion.
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Optional

from supabase import AuthApiError


class FakeResponse:
    def __init__(self, data: list[dict[str, Any]]):
        self.data = data
        self.count = len(data)


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload: Optional[dict[str, Any]] = None
        self._filters: list[tuple[str, Any]] = []
        self._order: Optional[tuple[str, bool]] = None
        self._limit: Optional[int] = None

    def select(self, *columns: str, count: Optional[str] = None) -> "FakeQuery":
        self._op = "select"
        return self

    def insert(self, data: dict[str, Any]) -> "FakeQuery":
        self._op = "insert"
        self._payload = data
        return self

    def update(self, data: dict[str, Any]) -> "FakeQuery":
        self._op = "update"
        self._payload = data
        return self

    def delete(self) -> "FakeQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self._limit = size
        return self

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    async def execute(self) -> FakeResponse:
        self._db.calls.append((self._table, self._op))
        if self._table in self._db.failing_tables:
            raise RuntimeError(f"backend unavailable: {self._table}")

        rows = self._db.tables.setdefault(self._table, [])

        if self._op == "insert":
            row = {"id": str(uuid.uuid4()), **self._payload}
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(self._payload)
            return FakeResponse([dict(row) for row in matched])

        if self._op == "delete":
            for row in matched:
                rows.remove(row)
            return FakeResponse([dict(row) for row in matched])

        if self._order is not None:
            column, desc = self._order
            matched = sorted(matched, key=lambda r: r.get(column) or "", reverse=desc)
        if self._limit is not None:
            matched = matched[: self._limit]
        return FakeResponse([dict(row) for row in matched])


def make_user(user_id: str, email: str, verified: bool = False) -> SimpleNamespace:
    return SimpleNamespace(
        id=user_id,
        email=email,
        email_confirmed_at=datetime.now(timezone.utc).isoformat() if verified else None,
        created_at=datetime.now(timezone.utc).isoformat(),
        last_sign_in_at=None,
        banned_until=None,
    )


class FakeAuthAdmin:
    def __init__(self):
        self.users: dict[str, SimpleNamespace] = {}
        self.list_calls: list[tuple[Optional[int], Optional[int]]] = []

    async def list_users(
        self, page: Optional[int] = None, per_page: Optional[int] = None
    ) -> list[SimpleNamespace]:
        self.list_calls.append((page, per_page))
        size = per_page or 50
        start = ((page or 1) - 1) * size
        return list(self.users.values())[start : start + size]

    async def get_user_by_id(self, uid: str) -> SimpleNamespace:
        if uid not in self.users:
            raise AuthApiError("User not found", 404, "user_not_found")
        return SimpleNamespace(user=self.users[uid])

    async def create_user(self, attributes: dict[str, Any]) -> SimpleNamespace:
        email = attributes["email"]
        if any(u.email == email for u in self.users.values()):
            raise AuthApiError(
                "A user with this email address has already been registered",
                422,
                "email_exists",
            )
        user = make_user(str(uuid.uuid4()), email, verified=attributes.get("email_confirm", False))
        self.users[user.id] = user
        return SimpleNamespace(user=user)

    async def delete_user(self, uid: str) -> None:
        if uid not in self.users:
            raise AuthApiError("User not found", 404, "user_not_found")
        del self.users[uid]


class FakeAuth:
    def __init__(self):
        self.admin = FakeAuthAdmin()
        self.sessions: dict[str, SimpleNamespace] = {}

    async def get_user(self, jwt: Optional[str] = None) -> SimpleNamespace:
        if jwt not in self.sessions:
            raise AuthApiError("invalid JWT: unable to parse or verify signature", 403, "bad_jwt")
        return SimpleNamespace(user=self.sessions[jwt])


class FakeSupabase:
    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.failing_tables: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.auth = FakeAuth()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def add_admin(self, user_id: str) -> None:
        self.tables.setdefault("admins", []).append({"id": user_id})

    def add_user(self, user_id: str, email: str, verified: bool = True) -> SimpleNamespace:
        user = make_user(user_id, email, verified)
        self.auth.admin.users[user_id] = user
        return user
