import logging
from pathlib import Path

from billed.storage.base import ReceiptStorage

logger = logging.getLogger(__name__)


class LocalStorage(ReceiptStorage):
    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def save(self, key: str, data: bytes, content_type: str = "image/png") -> str:
        path = self.base_dir / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        url = path.resolve().as_uri()
        logger.debug("Saved receipt %s (%d bytes, %s) to %s", key, len(data), content_type, url)
        return url
