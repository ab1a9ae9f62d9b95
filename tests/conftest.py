import pytest

from search_server import DocumentStatus, SearchServer
from search_server.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pets_server():
    server = SearchServer("и в на")
    server.add_document(1, "черный пёс рыжий хвост", DocumentStatus.ACTUAL, [1, 5, 7])
    server.add_document(2, "черный кот хвост", DocumentStatus.ACTUAL, [1, 5, 7])
    server.add_document(3, "белый попугай рыжий", DocumentStatus.ACTUAL, [1, 5, 7])
    return server


@pytest.fixture
def collar_server():
    server = SearchServer(["белый", "кот", "и", "модный", "ошейник"])
    server.add_document(10, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [1])
    server.add_document(11, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [2])
    server.add_document(12, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [3])
    return server
