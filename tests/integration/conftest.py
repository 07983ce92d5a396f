"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.database import Database


@pytest.fixture
async def client(seeded_db):
    """
    HTTP client for testing API endpoints.

    Points the app's database at the seeded test database.
    """
    # Store original db connection
    original_db = Database.db
    Database.db = seeded_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Restore original db
    Database.db = original_db
