"""
Meme Store - EOQ Meme Platform
eoq_platform/services/meme_store.py

In-memory session store for memes. Nothing is persisted; the store lives as
long as the process.
"""

import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

import structlog

from eoq_platform.core.exceptions import DuplicateMemeException, MemeNotFoundException
from eoq_platform.models.meme import Meme, MemeCreate, MemeUpdate

logger = structlog.get_logger(__name__)


class MemeStore:
    """
    Session store for memes keyed by id.

    Stored memes are frozen models; updates replace the stored instance.
    """

    def __init__(self, seed: Optional[Iterable[Meme]] = None):
        self._lock = threading.Lock()
        self._memes: Dict[str, Meme] = {}
        for meme in seed or []:
            self._memes[meme.id] = meme

    def list(self) -> List[Meme]:
        """Return all memes in insertion order."""
        with self._lock:
            return list(self._memes.values())

    def exists(self, meme_id: str) -> bool:
        with self._lock:
            return meme_id in self._memes

    def get(self, meme_id: str) -> Meme:
        with self._lock:
            meme = self._memes.get(meme_id)
        if meme is None:
            raise MemeNotFoundException(meme_id)
        return meme

    def add(self, meme: Meme) -> Meme:
        """Insert an already-built meme."""
        with self._lock:
            if meme.id in self._memes:
                raise DuplicateMemeException(meme.id)
            self._memes[meme.id] = meme
        logger.info("meme_added", meme_id=meme.id, name=meme.name)
        return meme

    def create(
        self,
        payload: MemeCreate,
        transform: Optional[Callable[[Meme], Meme]] = None,
    ) -> Meme:
        """Build a meme from the payload, pass it through transform, then insert it."""
        meme = Meme(**payload.model_dump(exclude_none=True))
        if transform is not None:
            meme = transform(meme)
        return self.add(meme)

    def update(
        self,
        meme_id: str,
        payload: MemeUpdate,
        transform: Optional[Callable[[Meme], Meme]] = None,
    ) -> Meme:
        """
        Replace a meme's content, keeping its id and creation time.

        transform runs before the write; if it raises, the stored meme is untouched.
        """
        with self._lock:
            current = self._memes.get(meme_id)
            if current is None:
                raise MemeNotFoundException(meme_id)
            updated = Meme(
                **payload.model_dump(),
                id=meme_id,
                created_at=current.created_at,
                last_analyzed=datetime.now(timezone.utc),
            )
            if transform is not None:
                updated = transform(updated)
            self._memes[meme_id] = updated
        logger.info("meme_updated", meme_id=meme_id)
        return updated

    def replace(self, meme: Meme) -> Meme:
        """Store a new version of an existing meme (e.g. with a refreshed EOQ)."""
        with self._lock:
            if meme.id not in self._memes:
                raise MemeNotFoundException(meme.id)
            self._memes[meme.id] = meme
        return meme

    def delete(self, meme_id: str) -> None:
        with self._lock:
            if self._memes.pop(meme_id, None) is None:
                raise MemeNotFoundException(meme_id)
        logger.info("meme_deleted", meme_id=meme_id)

    def reset(self, seed: Optional[Iterable[Meme]] = None) -> None:
        """Drop everything and reseed."""
        with self._lock:
            self._memes = {meme.id: meme for meme in seed or []}
