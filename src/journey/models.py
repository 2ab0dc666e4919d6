"""Journey state models: levels, emotional stages, achievements."""

from datetime import datetime
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

from shared_types import AchievementRarity

DEFAULT_WEEKLY_GOAL = 21  # 3 discoveries per day


class UserLevel(StrEnum):
    NOVICE = "novice"
    APPRENTICE = "apprentice"
    JOURNEYMAN = "journeyman"
    EXPERT = "expert"
    MASTER = "master"
    LEGEND = "legend"

    @property
    def label(self) -> str:
        return _LEVEL_META[self][0]

    @property
    def required_xp(self) -> int:
        return _LEVEL_META[self][1]

    @property
    def icon(self) -> str:
        return _LEVEL_META[self][2]

    @property
    def rank(self) -> int:
        return list(UserLevel).index(self)

    def next_level(self) -> Optional["UserLevel"]:
        levels = list(UserLevel)
        idx = levels.index(self)
        return levels[idx + 1] if idx + 1 < len(levels) else None


_LEVEL_META = {
    UserLevel.NOVICE: ("Novice Questioner", 0, "studentdesk"),
    UserLevel.APPRENTICE: ("Apprentice Skeptic", 100, "book.fill"),
    UserLevel.JOURNEYMAN: ("Journeyman Thinker", 300, "brain"),
    UserLevel.EXPERT: ("Expert Contrarian", 600, "crown"),
    UserLevel.MASTER: ("Master Philosopher", 1000, "star.circle.fill"),
    UserLevel.LEGEND: ("Legendary Maverick", 1500, "infinity"),
}


class JourneyStage(StrEnum):
    CURIOSITY = "curiosity"
    QUESTIONING = "questioning"
    CHALLENGING = "challenging"
    DISCOVERING = "discovering"
    TRANSFORMING = "transforming"
    MASTERING = "mastering"

    @property
    def label(self) -> str:
        return _STAGE_META[self][0]

    @property
    def description(self) -> str:
        return _STAGE_META[self][1]

    @property
    def milestone(self) -> int:
        return _STAGE_META[self][2]

    @property
    def rank(self) -> int:
        return list(JourneyStage).index(self)

    @classmethod
    def for_discoveries(cls, total: int) -> "JourneyStage":
        """Highest stage whose milestone is at or below *total*."""
        reached = cls.CURIOSITY
        for stage in cls:
            if total >= stage.milestone:
                reached = stage
        return reached


_STAGE_META = {
    JourneyStage.CURIOSITY: ("Awakening Curiosity", "Your mind is opening to new possibilities", 0),
    JourneyStage.QUESTIONING: ("Active Questioning", "You're beginning to question everything", 10),
    JourneyStage.CHALLENGING: ("Challenging Assumptions", "You actively challenge conventional wisdom", 30),
    JourneyStage.DISCOVERING: ("Deep Discovery", "Each truth reveals deeper layers of reality", 60),
    JourneyStage.TRANSFORMING: ("Mental Transformation", "Your worldview is fundamentally shifting", 100),
    JourneyStage.MASTERING: ("Intellectual Mastery", "You've transcended conventional thinking", 200),
}


class UnlockedAchievement(BaseModel):
    id: str
    name: str
    description: str
    icon_name: str
    unlocked_date: datetime
    rarity: AchievementRarity


class JourneyState(BaseModel):
    current_streak: int = 0
    longest_streak: int = 0
    total_days_engaged: int = 0
    last_visit_date: Optional[datetime] = None
    daily_discoveries: int = 0
    weekly_goal: int = DEFAULT_WEEKLY_GOAL
    weekly_progress: int = 0
    user_level: UserLevel = UserLevel.NOVICE
    experience_points: int = 0
    emotional_journey_stage: JourneyStage = JourneyStage.CURIOSITY
    achievement_history: list[UnlockedAchievement] = Field(default_factory=list)

    def has_achievement(self, achievement_id: str) -> bool:
        return any(a.id == achievement_id for a in self.achievement_history)
