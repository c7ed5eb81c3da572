import logging

from billed.settings import settings
from billed.stores.base import BillStore

logger = logging.getLogger(__name__)


def get_store() -> BillStore:
    backend = settings.store_backend

    if backend == "memory":
        from billed.fixtures import SAMPLE_BILLS
        from billed.storage.factory import get_storage
        from billed.stores.memory import MemoryBillStore

        logger.info("Using bill store: memory")
        return MemoryBillStore(get_storage(), records=SAMPLE_BILLS, prefix=settings.storage_prefix)

    if backend == "http":
        from billed.stores.http import HttpBillStore

        logger.info("Using bill store: http url=%s", settings.api_url)
        return HttpBillStore(settings.api_url, timeout=settings.api_timeout)

    raise ValueError(f"Unsupported store backend: {backend}")
