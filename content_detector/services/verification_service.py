"""Mocked content verification record; no real ledger is contacted."""
import secrets

from content_detector.core.clock import Clock
from content_detector.core.logging import get_logger
from content_detector.storage.models import BlockchainRecord
from content_detector.storage.repository import DetectionRepository

logger = get_logger(__name__)

VERIFIED_STATUS = "Verified"


def generate_mock_hash() -> str:
    """`0x` plus 40 hex digits, shortened for display."""
    full_hash = "0x" + secrets.token_hex(20)
    return full_hash[:20] + "..."


class VerificationService:
    def __init__(self, repository: DetectionRepository, clock: Clock) -> None:
        self._repository = repository
        self._clock = clock

    async def verify(self) -> BlockchainRecord:
        record = BlockchainRecord(
            status=VERIFIED_STATUS,
            hash=generate_mock_hash(),
            timestamp=self._clock.now().isoformat(),
        )
        await self._repository.update_blockchain(record)
        logger.info("content_verified", hash=record.hash)
        return record
