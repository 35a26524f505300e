from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel_services.reservation.domain.directory import (
    CustomerDirectory,
    RoomDirectory,
)
from hotel_services.reservation.domain.value_object import (
    Customer,
    CustomerId,
    Room,
    RoomId,
)
from hotel_services.shared.domain import Money


@pytest.fixture
def now():
    """テスト共通の現在時刻"""
    return datetime(2024, 1, 11, 12, 0)


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: str = "room-101",
        number: str = "101",
        daily_rate: Decimal | None = Decimal("100"),
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            number=number,
            daily_rate=Money.of(daily_rate) if daily_rate is not None else None,
        )

    return _factory


@pytest.fixture
def room(create_room):
    return create_room()


@pytest.fixture
def customer():
    return Customer(id=CustomerId(value="customer-1"), name="Ana Souza")


@pytest.fixture
def room_directory():
    """客室サービスのモックフィクスチャ"""
    return MagicMock(spec=RoomDirectory)


@pytest.fixture
def customer_directory():
    """顧客サービスのモックフィクスチャ"""
    return MagicMock(spec=CustomerDirectory)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
