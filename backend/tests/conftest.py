"""
Pytest fixtures and configuration for the Storefront API tests

Provides an in-memory stand-in for the Supabase query builder, signed
access tokens and a TestClient wired to the fake.

Author: Uday
Date: 2025-10-31
"""
import os
import time
from collections import defaultdict

# Settings are read at import time, so the environment goes first
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-the-storefront-suite")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from storefront.core.config import settings
from storefront.core.database import get_supabase
from storefront.core.rate_limit import rate_limiter


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """
    Records every builder call (select, eq, order, insert, ...) and
    returns the canned data on execute().
    """

    def __init__(self, table, data):
        self.table = table
        self.data = data
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self

        return method

    def execute(self):
        return FakeResponse(self.data)

    def called(self, name):
        """Arguments of every call to `name`"""
        return [(args, kwargs) for call, args, kwargs in self.calls if call == name]

    @property
    def operation(self):
        for name, _args, _kwargs in self.calls:
            if name in ("select", "insert", "update", "delete", "upsert"):
                return name
        return None


class AsyncFakeQuery(FakeQuery):
    async def execute(self):
        return FakeResponse(self.data)


class FakeSupabase:
    """
    Minimal Supabase client double

    Queue results per table with respond(); each table() call pops the
    next one (or [] when the queue is empty).
    """

    query_class = FakeQuery

    def __init__(self):
        self.responses = defaultdict(list)
        self.queries = []

    def respond(self, table, *results):
        self.responses[table].extend(results)
        return self

    def table(self, name):
        data = self.responses[name].pop(0) if self.responses[name] else []
        query = self.query_class(name, data)
        self.queries.append(query)
        return query

    def queries_for(self, table, operation=None):
        return [
            q for q in self.queries
            if q.table == table and (operation is None or q.operation == operation)
        ]


class AsyncFakeSupabase(FakeSupabase):
    query_class = AsyncFakeQuery


def make_token(user_id="user-1", email="shopper@example.com", expires_in=3600, **claims):
    """Sign a Supabase-style access token with the test secret"""
    now = int(time.time())
    payload = {
        "sub": user_id,
        "email": email,
        "role": "authenticated",
        "aud": settings.SUPABASE_JWT_AUDIENCE,
        "iat": now,
        "exp": now + expires_in,
        **claims,
    }
    return jwt.encode(payload, settings.SUPABASE_JWT_SECRET, algorithm="HS256")


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def user_id():
    return "user-1"


@pytest.fixture
def auth_headers(access_token):
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def client(fake_supabase):
    """TestClient with get_supabase overridden by the fake"""
    from storefront.main import app

    rate_limiter.reset()
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def product_row():
    """A products row as Supabase returns it"""
    return {
        "id": "prod-1",
        "name": "Wireless Headphones",
        "slug": "wireless-headphones",
        "description": "Noise cancelling over-ear headphones",
        "price": 79.99,
        "compare_at_price": 99.99,
        "image_url": "https://cdn.example.com/headphones.jpg",
        "images": [
            "https://cdn.example.com/headphones.jpg",
            "https://cdn.example.com/headphones-side.jpg",
        ],
        "stock": 5,
        "featured": True,
        "category_id": "cat-electronics",
        "created_at": "2025-10-01T12:00:00+00:00",
    }


@pytest.fixture
def cart_rows():
    """cart_items rows with the joined product"""
    return [
        {
            "id": "item-1",
            "quantity": 2,
            "product": {
                "id": "prod-1",
                "name": "Wireless Headphones",
                "slug": "wireless-headphones",
                "price": 15.00,
                "image_url": "https://cdn.example.com/headphones.jpg",
                "stock": 5,
            },
        },
        {
            "id": "item-2",
            "quantity": 1,
            "product": {
                "id": "prod-2",
                "name": "Paperback Novel",
                "slug": "paperback-novel",
                "price": 12.50,
                "image_url": "https://cdn.example.com/novel.jpg",
                "stock": 10,
            },
        },
    ]


@pytest.fixture
def order_row():
    return {
        "id": "3f2a9c1e-0000-4000-8000-000000000001",
        "user_id": "user-1",
        "status": "pending",
        "total_amount": 52.49,
        "shipping_address_line1": "1 Main St",
        "shipping_address_line2": "",
        "shipping_city": "Springfield",
        "shipping_state": "IL",
        "shipping_postal_code": "62701",
        "shipping_country": "United States",
        "created_at": "2025-10-30T09:15:00+00:00",
        "order_items": [
            {"product_name": "Wireless Headphones", "product_price": 15.00, "quantity": 2},
            {"product_name": "Paperback Novel", "product_price": 12.50, "quantity": 1},
        ],
    }


@pytest.fixture
def shipping_address():
    return {
        "address_line1": "1 Main St",
        "address_line2": "Apt 4",
        "city": "Springfield",
        "state": "IL",
        "postal_code": "62701",
        "country": "United States",
    }


@pytest.fixture
def async_fake_supabase():
    return AsyncFakeSupabase()


@pytest.fixture
def access_token(user_id):
    return make_token(user_id)


@pytest.fixture
def expired_token(user_id):
    return make_token(user_id, expires_in=-60)


@pytest.fixture
def token_factory():
    """make_token, for tests that need custom claims"""
    return make_token
