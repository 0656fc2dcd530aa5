"""
Shared fixtures for chat export tests.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from chat_export.config import ExportConfig
from chat_export.data import InMemoryChatRepository
from chat_export.models import ChatRoom
from chat_export.server import create_app

from tests.factories import NOW, make_message


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def config():
    return ExportConfig(app_name="JabbR", base_url="http://jabbr.net")


@pytest.fixture
def repository():
    repo = InMemoryChatRepository()
    repo.add_room(ChatRoom(name="Lobby"))
    repo.add_room(ChatRoom(name="secret", private=True))
    repo.add_room(ChatRoom(name="attic", closed=True))

    # Deliberately out of chronological order
    repo.add_message("Lobby", make_message("m2", "second", "bob", NOW - timedelta(minutes=30)))
    repo.add_message("Lobby", make_message("m1", "<b>first</b>", "alice", NOW - timedelta(hours=2)))
    repo.add_message("Lobby", make_message("m3", "third", "carol", NOW - timedelta(minutes=5)))
    repo.add_message("Lobby", make_message("m0", "ancient", "dave", NOW - timedelta(days=3)))

    repo.add_message("secret", make_message("s1", "hidden", "eve", NOW - timedelta(minutes=1)))
    repo.add_message("attic", make_message("a1", "dusty", "frank", NOW - timedelta(hours=3)))
    return repo


@pytest.fixture
def client(config, repository):
    app = create_app(config, repository, clock=lambda: NOW)
    with TestClient(app) as test_client:
        yield test_client
