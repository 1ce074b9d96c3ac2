"""Meditation content API schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MeditationCategory(str, Enum):
    GUIDED = "guided"
    MUSIC = "music"
    NATURE = "nature"
    BREATHING = "breathing"
    IN_APP = "in-app"


class MeditationType(str, Enum):
    GUIDED = "guided"
    IN_APP = "in-app"


class CreateMeditationRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    duration: int = Field(gt=0, description="Length in minutes.")
    audio_url: str = Field(min_length=1)
    category: MeditationCategory
    type: MeditationType = MeditationType.GUIDED
    instructions: list[str] = Field(default_factory=list)
    thumbnail: str = ""
    is_premium: bool = False


class UpdateMeditationRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    duration: int | None = Field(default=None, gt=0)
    audio_url: str | None = Field(default=None, min_length=1)
    category: MeditationCategory | None = None
    type: MeditationType | None = None
    instructions: list[str] | None = None
    thumbnail: str | None = None
    is_premium: bool | None = None


class Meditation(BaseModel):
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
