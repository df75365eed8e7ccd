from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 行ストアへのアクセス（キー取得・存在確認・挿入）を抽象化する
    - 複数テーブルにまたがるトランザクションは提供しない
    """

    @abstractmethod
    def insert(self, aggregate: T) -> T:
        """レコードを挿入し、保存した値を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """キーでレコードを検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists(self, id: ID) -> bool:
        """キーに対応するレコードが存在するか"""
        raise NotImplementedError
