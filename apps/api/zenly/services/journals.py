"""Journal entry service layer."""

import math

from zenly.domain.access import authorize_owned_record
from zenly.repositories.memory import InMemoryStore, JournalRecord
from zenly.schemas.journal import CreateJournalRequest, JournalEntry, JournalPage, UpdateJournalRequest
from zenly.schemas.mood import MoodKind
from zenly.services.updates import clearable_changes

_NULLABLE_FIELDS = frozenset({"mood"})


class JournalService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def create_journal(self, *, owner_id: str, payload: CreateJournalRequest) -> JournalEntry:
        record = self._store.create_journal(
            owner_id=owner_id,
            title=payload.title,
            content=payload.content,
            mood=payload.mood,
            tags=payload.tags,
            is_private=payload.is_private,
        )
        return self._to_entry(record)

    def list_journals(
        self,
        *,
        owner_id: str,
        page: int = 1,
        limit: int = 10,
        tag: str | None = None,
        mood: MoodKind | None = None,
    ) -> JournalPage:
        # Stored tags are stripped, so the filter value must be too.
        tag = (tag or "").strip() or None
        records, total = self._store.list_journals_for_owner(
            owner_id,
            tag=tag,
            mood=mood,
            offset=(page - 1) * limit,
            limit=limit,
        )
        return JournalPage(
            count=len(records),
            total=total,
            total_pages=math.ceil(total / limit),
            current_page=page,
            data=[self._to_entry(record) for record in records],
        )

    def get_journal(self, *, owner_id: str, journal_id: str) -> JournalEntry:
        record = authorize_owned_record(owner_id, self._store.get_journal(journal_id))
        return self._to_entry(record)

    def update_journal(self, *, owner_id: str, journal_id: str, payload: UpdateJournalRequest) -> JournalEntry:
        record = authorize_owned_record(owner_id, self._store.get_journal(journal_id))
        changes = clearable_changes(payload, nullable=_NULLABLE_FIELDS)
        return self._to_entry(self._store.update_journal(record, changes))

    def delete_journal(self, *, owner_id: str, journal_id: str) -> None:
        record = authorize_owned_record(owner_id, self._store.get_journal(journal_id))
        self._store.delete_journal(record.id)

    @staticmethod
    def _to_entry(record: JournalRecord) -> JournalEntry:
        return JournalEntry(
            id=record.id,
            title=record.title,
            content=record.content,
            mood=record.mood,
            tags=record.tags,
            is_private=record.is_private,
            created_at=record.created_at,
        )
