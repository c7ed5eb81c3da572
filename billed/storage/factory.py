import logging

from billed.settings import settings
from billed.storage.base import ReceiptStorage

logger = logging.getLogger(__name__)


def get_storage() -> ReceiptStorage:
    backend = settings.storage_backend

    if backend == "local":
        from billed.storage.local import LocalStorage

        logger.info("Using receipt storage: local path=%s", settings.storage_local_path)
        return LocalStorage(settings.storage_local_path)

    raise ValueError(f"Unsupported storage backend: {backend}")
