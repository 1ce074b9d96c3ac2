"""Mood entry API schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class MoodKind(str, Enum):
    HAPPY = "happy"
    CALM = "calm"
    NEUTRAL = "neutral"
    ANXIOUS = "anxious"
    SAD = "sad"
    ANGRY = "angry"


class Activity(str, Enum):
    MEDITATION = "meditation"
    EXERCISE = "exercise"
    READING = "reading"
    SOCIAL = "social"
    WORK = "work"
    REST = "rest"


class CreateMoodRequest(BaseModel):
    mood: MoodKind
    intensity: int = Field(ge=1, le=10)
    notes: str | None = Field(default=None, max_length=500)
    activities: list[Activity] = Field(default_factory=list)


class UpdateMoodRequest(BaseModel):
    mood: MoodKind | None = None
    intensity: int | None = Field(default=None, ge=1, le=10)
    notes: str | None = Field(default=None, max_length=500)
    activities: list[Activity] | None = None


class MoodEntry(BaseModel):
    id: str
    mood: MoodKind
    intensity: int
    notes: str | None = None
    activities: list[Activity]
    created_at: datetime
