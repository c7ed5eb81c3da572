from abc import ABC, abstractmethod


class ReceiptStorage(ABC):
    @abstractmethod
    def save(self, key: str, data: bytes, content_type: str = "image/png") -> str:
        """Save receipt data and return the URL the receipt viewer opens."""
        ...
