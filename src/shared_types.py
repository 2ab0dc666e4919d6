"""Shared enums and types for contrario."""

from enum import StrEnum


class CategoryGroup(StrEnum):
    BUSINESS = "business"
    THINKING = "thinking"
    SOCIAL = "social"
    TECHNOLOGY = "technology"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _GROUP_DISPLAY[self]

    @property
    def icon(self) -> str:
        return _GROUP_ICONS[self]


_GROUP_DISPLAY = {
    CategoryGroup.BUSINESS: "Business & Innovation",
    CategoryGroup.THINKING: "Philosophy & Thinking",
    CategoryGroup.SOCIAL: "Society & Politics",
    CategoryGroup.TECHNOLOGY: "Technology",
    CategoryGroup.OTHER: "Other",
}

_GROUP_ICONS = {
    CategoryGroup.BUSINESS: "briefcase.fill",
    CategoryGroup.THINKING: "brain",
    CategoryGroup.SOCIAL: "person.3.fill",
    CategoryGroup.TECHNOLOGY: "cpu",
    CategoryGroup.OTHER: "folder",
}


class CategoryStatus(StrEnum):
    LOCKED = "locked"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AchievementRarity(StrEnum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def xp_reward(self) -> int:
        return _RARITY_XP[self]


_RARITY_XP = {
    AchievementRarity.COMMON: 25,
    AchievementRarity.RARE: 50,
    AchievementRarity.EPIC: 100,
    AchievementRarity.LEGENDARY: 200,
}


class StoryType(StrEnum):
    TOP = "topstories"
    BEST = "beststories"
    NEW = "newstories"
    ASK = "askstories"
    SHOW = "showstories"

    @property
    def display_name(self) -> str:
        return _STORY_DISPLAY[self]

    @classmethod
    def from_name(cls, name: str) -> "StoryType":
        """Accept either the short name ("top") or the endpoint name ("topstories")."""
        name = name.lower().strip()
        for member in cls:
            if name in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown story type: {name}")


_STORY_DISPLAY = {
    StoryType.TOP: "Top",
    StoryType.BEST: "Best",
    StoryType.NEW: "New",
    StoryType.ASK: "Ask HN",
    StoryType.SHOW: "Show HN",
}
