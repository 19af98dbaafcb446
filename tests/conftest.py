import copy
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core import db
from main import app

# A complete settings body as a client would PUT it (no clientId).
VALID_BODY = {
    "deliveryMethods": [
        {
            "name": "Print Now",
            "enum": "PRINT_NOW",
            "order": 1,
            "isDefault": True,
            "selected": True,
        },
    ],
    "fulfillmentFormat": {"rfid": False, "print": False},
    "printer": {"id": None},
    "printingFormat": {"formatA": True, "formatB": False},
    "scanning": {"scanManually": True, "scanWhenComplete": False},
    "paymentMethods": {"cash": True, "creditCard": False, "comp": False},
    "ticketDisplay": {"leftInAllotment": True, "soldOut": True},
    "customerInfo": {"active": False, "basicInfo": False, "addressInfo": False},
}


class FakePool:
    """
    In-memory stand-in for an asyncpg pool.

    Understands the handful of statements the repositories issue and records
    every call so tests can assert on what reached the database.
    """

    def __init__(self, events=None, tickets=None, settings=None):
        self.events = list(events or [])
        self.tickets = list(tickets or [])
        self.settings = {k: copy.deepcopy(v) for k, v in (settings or {}).items()}
        self.calls = []
        self.fail_with = None

    def _record(self, method, sql, args):
        self.calls.append((method, " ".join(sql.split()), args))
        if self.fail_with is not None:
            raise self.fail_with

    def calls_to(self, method):
        return [call for call in self.calls if call[0] == method]

    async def fetchrow(self, sql, *args):
        self._record("fetchrow", sql, args)
        if "FROM client_settings" in sql:
            doc = self.settings.get(args[0])
            return None if doc is None else {"settings": copy.deepcopy(doc)}
        raise AssertionError(f"unexpected fetchrow: {sql}")

    async def fetch(self, sql, *args):
        self._record("fetch", sql, args)
        if "FROM tickets" in sql:
            event_id, limit, cursor = args
            rows = sorted(
                (t for t in self.tickets if t["eventId"] == event_id),
                key=lambda t: t["id"],
            )
            if cursor is not None:
                rows = [t for t in rows if t["id"] > cursor]
            return [dict(t) for t in rows[:limit]]
        if "FROM events" in sql:
            limit, cursor = args
            rows = sorted(self.events, key=lambda e: (e["date"], e["id"]), reverse=True)
            anchor = next((e for e in self.events if e["id"] == cursor), None)
            if anchor is not None:
                rows = [e for e in rows if (e["date"], e["id"]) < (anchor["date"], anchor["id"])]
            return [dict(e) for e in rows[:limit]]
        raise AssertionError(f"unexpected fetch: {sql}")

    async def execute(self, sql, *args):
        self._record("execute", sql, args)
        if "INSERT INTO client_settings" in sql:
            self.settings[args[0]] = copy.deepcopy(args[1])
            return "INSERT 0 1"
        if "CREATE TABLE" in sql:
            return "CREATE TABLE"
        raise AssertionError(f"unexpected execute: {sql}")


def make_event(event_id, day, name=None):
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return {
        "id": event_id,
        "name": name or f"Event {event_id}",
        "date": date(2024, 6, day),
        "location": "Main Hall",
        "description": None,
        "createdAt": stamp,
        "updatedAt": stamp,
    }


def make_ticket(ticket_id, event_id, price="25.00"):
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return {
        "id": ticket_id,
        "eventId": event_id,
        "type": "standard",
        "status": "available",
        "price": Decimal(price),
        "createdAt": stamp,
        "updatedAt": stamp,
    }


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest_asyncio.fixture
async def client(fake_pool):
    """HTTP client against the app with the database pool replaced."""
    app.dependency_overrides[db.get_pool] = lambda: fake_pool

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
