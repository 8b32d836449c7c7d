"""
Submission Coordinator for the worldfeel service.

Owns the write path: validates the word, resolves who is submitting, and
decides between creating a record, editing it in place, or reporting a
conflict. The aggregate returned for an accepted write is computed inside the
write's transaction and bypasses the result cache, which is cleared once the
transaction commits.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Optional

from worldfeel.config.settings import settings
from worldfeel.core.aggregation import AggregationEngine
from worldfeel.core.cache import ResultCache
from worldfeel.core.errors import WordValidationError, WorldFeelError
from worldfeel.core.identity import new_device_token, resolve_identity
from worldfeel.core.profanity import ensure_clean
from worldfeel.core.record_store import SubmissionStore
from worldfeel.core.vocabulary import canonicalize_word, normalize_word
from worldfeel.models import SubmissionORM
from worldfeel.models.dtos import AggregateResult, SubmissionRecordDTO
from worldfeel.monitoring.metrics import record_rejection, record_submission
from worldfeel.utils.logging_utils import short_hash

logger = logging.getLogger(__name__)


class SubmissionStatus(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    CONFLICT = "conflict"


@dataclass
class SubmissionOutcome:
    """Result of one submit call, including the aggregate to show the visitor."""
    status: SubmissionStatus
    record: SubmissionRecordDTO
    aggregate: AggregateResult
    editable: bool
    edit_window_remaining: timedelta
    issued_device_token: Optional[str] = None

    @property
    def edit_window_remaining_seconds(self) -> int:
        return max(0, int(self.edit_window_remaining.total_seconds()))


class SubmissionCoordinator:
    """
    Applies the create / edit / conflict rules for a single submission.

    Args:
        store: Record store bound to the request's session.
        engine: Aggregation engine used to build the response aggregate.
        cache: Result cache cleared on every create or edit.
        clock: Returns the current aware UTC datetime.
        edit_window: How long after creation a record may be edited.
        retention: How long a record stays active.
        secret: Server secret for the daily identity salt.
    """

    def __init__(
        self,
        store: SubmissionStore,
        engine: AggregationEngine,
        cache: Optional[ResultCache] = None,
        clock: Optional[Callable[[], datetime]] = None,
        edit_window: Optional[timedelta] = None,
        retention: Optional[timedelta] = None,
        secret: Optional[str] = None,
    ):
        self.store = store
        self.engine = engine
        self.cache = cache
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.edit_window = edit_window if edit_window is not None else timedelta(minutes=settings.EDIT_WINDOW_MINUTES)
        self.retention = retention if retention is not None else timedelta(hours=settings.RETENTION_HOURS)
        self.secret = secret or settings.DAY_SALT_SECRET

    async def submit(
        self,
        word: str,
        network_address: str,
        device_token: Optional[str] = None,
    ) -> SubmissionOutcome:
        """
        Submit a word for the caller identified by address and device token.

        Raises:
            WordValidationError: before any store access, if the word is rejected.
        """
        try:
            ensure_clean(normalize_word(word))
            canonical = canonicalize_word(word)
        except WordValidationError as e:
            record_rejection(e.reason)
            raise

        now = self.clock()
        identity_hash = resolve_identity(network_address, now.date(), self.secret)
        issued_device_token = None
        if not device_token:
            device_token = new_device_token()
            issued_device_token = device_token

        existing = await self.store.find_latest_active(identity_hash, device_token, now)
        if existing is None:
            record = await self.store.insert(
                word=canonical,
                identity_hash=identity_hash,
                device_token=device_token,
                created_at=now,
                expires_at=now + self.retention,
            )
            if record is not None:
                logger.info("Created submission '%s' for identity %s", canonical, short_hash(identity_hash))
                return await self._accepted(SubmissionStatus.CREATED, record, self.edit_window, issued_device_token)

            # Lost an insert race to a concurrent request from the same identity.
            existing = await self.store.find_latest_active(identity_hash, device_token, now)
            if existing is None:
                raise WorldFeelError("Submission conflicted with a record that no longer exists")
            logger.info("Insert race lost for identity %s; re-evaluating winner", short_hash(identity_hash))

        return await self._resolve_existing(existing, canonical, device_token, now, issued_device_token)

    async def _resolve_existing(
        self,
        existing: SubmissionORM,
        canonical: str,
        device_token: str,
        now: datetime,
        issued_device_token: Optional[str],
    ) -> SubmissionOutcome:
        age = now - existing.created_at
        if age <= self.edit_window:
            previous = existing.word
            record = await self.store.update_word(existing, canonical, device_token, now)
            logger.info(
                "Updated submission %s: '%s' -> '%s' (identity %s)",
                record.id, previous, canonical, short_hash(record.identity_hash),
            )
            return await self._accepted(SubmissionStatus.UPDATED, record, self.edit_window - age, issued_device_token)

        logger.info(
            "Conflict: identity %s already submitted '%s' %ds ago",
            short_hash(existing.identity_hash), existing.word, int(age.total_seconds()),
        )
        record_submission(SubmissionStatus.CONFLICT.value)
        aggregate = await self.engine.aggregate(focus_word=existing.word)
        return SubmissionOutcome(
            status=SubmissionStatus.CONFLICT,
            record=SubmissionRecordDTO.model_validate(existing),
            aggregate=aggregate,
            editable=False,
            edit_window_remaining=timedelta(0),
            issued_device_token=issued_device_token,
        )

    async def _accepted(
        self,
        status: SubmissionStatus,
        record: SubmissionORM,
        remaining: timedelta,
        issued_device_token: Optional[str],
    ) -> SubmissionOutcome:
        record_submission(status.value)
        if self.cache is not None:
            self.store.on_commit(self.cache.invalidate_all)
        aggregate = await self.engine.aggregate(focus_word=record.word, use_cache=False)
        return SubmissionOutcome(
            status=status,
            record=SubmissionRecordDTO.model_validate(record),
            aggregate=aggregate,
            editable=True,
            edit_window_remaining=remaining,
            issued_device_token=issued_device_token,
        )
