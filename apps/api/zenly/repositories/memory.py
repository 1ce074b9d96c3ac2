"""In-memory repositories used by the API and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from zenly.schemas.auth import Role
from zenly.schemas.meditation import MeditationCategory, MeditationType
from zenly.schemas.mood import Activity, MoodKind


@dataclass(slots=True)
class UserRecord:
    id: str
    name: str
    email: str
    password_hash: str
    role: Role
    created_at: datetime


@dataclass(slots=True)
class MoodRecord:
    id: str
    owner_id: str
    mood: MoodKind
    intensity: int
    notes: str | None
    activities: list[Activity]
    created_at: datetime


@dataclass(slots=True)
class JournalRecord:
    id: str
    owner_id: str
    title: str
    content: str
    mood: MoodKind | None
    tags: list[str]
    is_private: bool
    created_at: datetime


@dataclass(slots=True)
class MeditationRecord:
    id: str
    title: str
    description: str
    duration: int
    audio_url: str
    category: MeditationCategory
    type: MeditationType
    instructions: list[str]
    thumbnail: str
    is_premium: bool
    created_at: datetime


_MOOD_MUTABLE_FIELDS = frozenset({"mood", "intensity", "notes", "activities"})
_JOURNAL_MUTABLE_FIELDS = frozenset({"title", "content", "mood", "tags", "is_private"})
_MEDITATION_MUTABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "duration",
        "audio_url",
        "category",
        "type",
        "instructions",
        "thumbnail",
        "is_premium",
    }
)


def _apply_changes(record: Any, changes: dict[str, Any], allowed: frozenset[str]) -> None:
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Fields not updatable: {sorted(unknown)}")
    for name, value in changes.items():
        setattr(record, name, value)


@dataclass(slots=True)
class InMemoryStore:
    """Simple, deterministic persistence layer.

    Dict insertion order is creation order, so "newest first" listings walk the
    dicts in reverse.
    """

    users: dict[str, UserRecord] = field(default_factory=dict)
    moods: dict[str, MoodRecord] = field(default_factory=dict)
    journals: dict[str, JournalRecord] = field(default_factory=dict)
    meditations: dict[str, MeditationRecord] = field(default_factory=dict)
    user_write_count: int = 0
    mood_write_count: int = 0
    journal_write_count: int = 0
    meditation_write_count: int = 0

    # Accounts

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role = Role.USER) -> UserRecord:
        if self.find_user_by_email(email) is not None:
            raise ValueError("email_exists")
        user = UserRecord(
            id=str(uuid4()),
            name=name,
            email=email.strip().lower(),
            password_hash=password_hash,
            role=role,
            created_at=datetime.now(UTC),
        )
        self.users[user.id] = user
        self.user_write_count += 1
        return user

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    def find_user_by_email(self, email: str) -> UserRecord | None:
        normalized = email.strip().lower()
        for user in self.users.values():
            if user.email == normalized:
                return user
        return None

    def find_first_admin(self) -> UserRecord | None:
        for user in self.users.values():
            if user.role == Role.ADMIN:
                return user
        return None

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())

    def update_user_role(self, user: UserRecord, role: Role) -> None:
        user.role = role
        self.user_write_count += 1

    def update_user_name(self, user: UserRecord, name: str) -> None:
        user.name = name
        self.user_write_count += 1

    def update_user_password(self, user: UserRecord, password_hash: str) -> None:
        user.password_hash = password_hash
        self.user_write_count += 1

    def delete_user(self, user_id: str) -> bool:
        removed = self.users.pop(user_id, None)
        if removed is None:
            return False
        self.user_write_count += 1
        return True

    # Mood entries

    def create_mood(
        self,
        *,
        owner_id: str,
        mood: MoodKind,
        intensity: int,
        notes: str | None,
        activities: list[Activity],
    ) -> MoodRecord:
        record = MoodRecord(
            id=str(uuid4()),
            owner_id=owner_id,
            mood=mood,
            intensity=intensity,
            notes=notes,
            activities=list(activities),
            created_at=datetime.now(UTC),
        )
        self.moods[record.id] = record
        self.mood_write_count += 1
        return record

    def get_mood(self, mood_id: str) -> MoodRecord | None:
        return self.moods.get(mood_id)

    def list_moods_for_owner(self, owner_id: str) -> list[MoodRecord]:
        return [record for record in reversed(self.moods.values()) if record.owner_id == owner_id]

    def update_mood(self, record: MoodRecord, changes: dict[str, Any]) -> MoodRecord:
        _apply_changes(record, changes, _MOOD_MUTABLE_FIELDS)
        self.mood_write_count += 1
        return record

    def delete_mood(self, mood_id: str) -> bool:
        removed = self.moods.pop(mood_id, None)
        if removed is None:
            return False
        self.mood_write_count += 1
        return True

    # Journal entries

    def create_journal(
        self,
        *,
        owner_id: str,
        title: str,
        content: str,
        mood: MoodKind | None,
        tags: list[str],
        is_private: bool,
    ) -> JournalRecord:
        record = JournalRecord(
            id=str(uuid4()),
            owner_id=owner_id,
            title=title,
            content=content,
            mood=mood,
            tags=list(tags),
            is_private=is_private,
            created_at=datetime.now(UTC),
        )
        self.journals[record.id] = record
        self.journal_write_count += 1
        return record

    def get_journal(self, journal_id: str) -> JournalRecord | None:
        return self.journals.get(journal_id)

    def list_journals_for_owner(
        self,
        owner_id: str,
        *,
        tag: str | None = None,
        mood: MoodKind | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> tuple[list[JournalRecord], int]:
        """Return one page of the owner's entries (newest first) and the filtered total."""
        matches = [
            record
            for record in reversed(self.journals.values())
            if record.owner_id == owner_id
            and (tag is None or tag in record.tags)
            and (mood is None or record.mood == mood)
        ]
        end = None if limit is None else offset + limit
        return matches[offset:end], len(matches)

    def update_journal(self, record: JournalRecord, changes: dict[str, Any]) -> JournalRecord:
        _apply_changes(record, changes, _JOURNAL_MUTABLE_FIELDS)
        self.journal_write_count += 1
        return record

    def delete_journal(self, journal_id: str) -> bool:
        removed = self.journals.pop(journal_id, None)
        if removed is None:
            return False
        self.journal_write_count += 1
        return True

    # Meditations

    def create_meditation(
        self,
        *,
        title: str,
        description: str,
        duration: int,
        audio_url: str,
        category: MeditationCategory,
        type: MeditationType,
        instructions: list[str],
        thumbnail: str,
        is_premium: bool,
    ) -> MeditationRecord:
        record = MeditationRecord(
            id=str(uuid4()),
            title=title,
            description=description,
            duration=duration,
            audio_url=audio_url,
            category=category,
            type=type,
            instructions=list(instructions),
            thumbnail=thumbnail,
            is_premium=is_premium,
            created_at=datetime.now(UTC),
        )
        self.meditations[record.id] = record
        self.meditation_write_count += 1
        return record

    def get_meditation(self, meditation_id: str) -> MeditationRecord | None:
        return self.meditations.get(meditation_id)

    def list_meditations(self) -> list[MeditationRecord]:
        return list(reversed(self.meditations.values()))

    def update_meditation(self, record: MeditationRecord, changes: dict[str, Any]) -> MeditationRecord:
        _apply_changes(record, changes, _MEDITATION_MUTABLE_FIELDS)
        self.meditation_write_count += 1
        return record

    def delete_meditation(self, meditation_id: str) -> bool:
        removed = self.meditations.pop(meditation_id, None)
        if removed is None:
            return False
        self.meditation_write_count += 1
        return True
