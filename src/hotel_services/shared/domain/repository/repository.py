from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - 物理削除は提供しない
    """

    @abstractmethod
    def save(self, entity: T) -> None:
        """新規に永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで検索する"""
        raise NotImplementedError
