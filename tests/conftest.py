import pytest

from common.game import Game
from helpers import FakeTransport


@pytest.fixture()
def game():
    return Game()


@pytest.fixture()
def transport():
    return FakeTransport()
