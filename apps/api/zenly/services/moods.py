"""Mood entry service layer."""

from zenly.domain.access import authorize_owned_record
from zenly.repositories.memory import InMemoryStore, MoodRecord
from zenly.schemas.mood import CreateMoodRequest, MoodEntry, UpdateMoodRequest
from zenly.services.updates import clearable_changes

_NULLABLE_FIELDS = frozenset({"notes"})


class MoodService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def create_mood(self, *, owner_id: str, payload: CreateMoodRequest) -> MoodEntry:
        record = self._store.create_mood(
            owner_id=owner_id,
            mood=payload.mood,
            intensity=payload.intensity,
            notes=payload.notes,
            activities=payload.activities,
        )
        return self._to_entry(record)

    def list_moods(self, *, owner_id: str) -> list[MoodEntry]:
        return [self._to_entry(record) for record in self._store.list_moods_for_owner(owner_id)]

    def get_mood(self, *, owner_id: str, mood_id: str) -> MoodEntry:
        record = authorize_owned_record(owner_id, self._store.get_mood(mood_id))
        return self._to_entry(record)

    def update_mood(self, *, owner_id: str, mood_id: str, payload: UpdateMoodRequest) -> MoodEntry:
        record = authorize_owned_record(owner_id, self._store.get_mood(mood_id))
        changes = clearable_changes(payload, nullable=_NULLABLE_FIELDS)
        return self._to_entry(self._store.update_mood(record, changes))

    def delete_mood(self, *, owner_id: str, mood_id: str) -> None:
        record = authorize_owned_record(owner_id, self._store.get_mood(mood_id))
        self._store.delete_mood(record.id)

    @staticmethod
    def _to_entry(record: MoodRecord) -> MoodEntry:
        return MoodEntry(
            id=record.id,
            mood=record.mood,
            intensity=record.intensity,
            notes=record.notes,
            activities=record.activities,
            created_at=record.created_at,
        )
