from abc import abstractmethod
from uuid import UUID

from reservations.guest.domain.entity.guest import Guest
from reservations.shared.domain import Repository


class GuestRepository(Repository[Guest, UUID]):
    """宿泊客レポジトリのインターフェース"""

    @abstractmethod
    def insert(self, guest: Guest) -> Guest:
        """宿泊客を登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, guest_id: UUID) -> Guest | None:
        """宿泊客IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists(self, guest_id: UUID) -> bool:
        """宿泊客IDが登録済みか"""
        raise NotImplementedError
