from abc import ABC, abstractmethod

from hotel_services.reservation.domain.value_object import Customer, CustomerId


class CustomerDirectory(ABC):
    """顧客サービスのインターフェース"""

    @abstractmethod
    def get_by_id(self, customer_id: CustomerId) -> Customer:
        """顧客IDで取得する（存在しなければ ResourceNotFoundException）"""
        raise NotImplementedError
