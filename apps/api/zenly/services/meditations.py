"""Meditation content service layer."""

from zenly.errors import not_found
from zenly.repositories.memory import InMemoryStore, MeditationRecord
from zenly.schemas.meditation import CreateMeditationRequest, Meditation, UpdateMeditationRequest


class MeditationService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_meditations(self) -> list[Meditation]:
        return [self._to_meditation(record) for record in self._store.list_meditations()]

    def get_meditation(self, *, meditation_id: str) -> Meditation:
        return self._to_meditation(self._require(meditation_id))

    def create_meditation(self, *, payload: CreateMeditationRequest) -> Meditation:
        record = self._store.create_meditation(**payload.model_dump())
        return self._to_meditation(record)

    def update_meditation(self, *, meditation_id: str, payload: UpdateMeditationRequest) -> Meditation:
        record = self._require(meditation_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        return self._to_meditation(self._store.update_meditation(record, changes))

    def delete_meditation(self, *, meditation_id: str) -> None:
        if not self._store.delete_meditation(meditation_id):
            raise not_found()

    def start_session(self, *, meditation_id: str) -> Meditation:
        # Sessions are not persisted; starting one only checks the meditation exists.
        return self._to_meditation(self._require(meditation_id))

    def _require(self, meditation_id: str) -> MeditationRecord:
        record = self._store.get_meditation(meditation_id)
        if record is None:
            raise not_found()
        return record

    @staticmethod
    def _to_meditation(record: MeditationRecord) -> Meditation:
        return Meditation(
            id=record.id,
            title=record.title,
            description=record.description,
            duration=record.duration,
            audio_url=record.audio_url,
            category=record.category,
            type=record.type,
            instructions=record.instructions,
            thumbnail=record.thumbnail,
            is_premium=record.is_premium,
            created_at=record.created_at,
        )
