"""Achievement catalogue."""

from dataclasses import dataclass

from journey.models import JourneyStage, UserLevel
from shared_types import AchievementRarity


@dataclass(frozen=True)
class AchievementDefinition:
    id: str
    name: str
    description: str
    icon_name: str
    rarity: AchievementRarity
    threshold: int = 0


FIRST_VISIT = AchievementDefinition(
    "first_visit", "Welcome, Contrarian", "Begin your intellectual journey",
    "door.left.hand.open", AchievementRarity.COMMON,
)

STREAK_MILESTONES = [
    AchievementDefinition("streak_3", "Triduum", "3 day streak", "flame.fill", AchievementRarity.COMMON, 3),
    AchievementDefinition("streak_7", "Week Warrior", "7 day streak", "flame.circle.fill", AchievementRarity.RARE, 7),
    AchievementDefinition(
        "streak_30", "Monthly Master", "30 day streak", "flame.circle.fill", AchievementRarity.EPIC, 30
    ),
    AchievementDefinition(
        "streak_100", "Centurion", "100 day streak", "flame.circle.fill", AchievementRarity.LEGENDARY, 100
    ),
]

DISCOVERY_MILESTONES = [
    AchievementDefinition(
        "first_discovery", "First Truth", "Your first contrarian insight", "lightbulb.fill",
        AchievementRarity.COMMON, 1,
    ),
    AchievementDefinition(
        "discovery_10", "Truth Seeker", "10 discoveries made", "magnifyingglass.circle.fill",
        AchievementRarity.COMMON, 10,
    ),
    AchievementDefinition(
        "discovery_50", "Knowledge Hunter", "50 discoveries made", "book.circle.fill",
        AchievementRarity.RARE, 50,
    ),
    AchievementDefinition(
        "discovery_100", "Wisdom Collector", "100 discoveries made", "brain", AchievementRarity.EPIC, 100
    ),
    AchievementDefinition(
        "discovery_500", "Omniscient", "500 discoveries made", "eye.circle.fill",
        AchievementRarity.LEGENDARY, 500,
    ),
]

DAILY_MILESTONES = [
    AchievementDefinition(
        "daily_5", "Daily Dedication", "5 discoveries in one day", "sun.max.fill", AchievementRarity.COMMON, 5
    ),
    AchievementDefinition(
        "daily_10", "Information Hungry", "10 discoveries in one day", "sun.max.circle.fill",
        AchievementRarity.RARE, 10,
    ),
    AchievementDefinition(
        "daily_20", "Insatiable Mind", "20 discoveries in one day", "sun.max.trianglebadge.exclamationmark",
        AchievementRarity.EPIC, 20,
    ),
]


def reached(milestones: list[AchievementDefinition], value: int) -> list[AchievementDefinition]:
    return [m for m in milestones if value >= m.threshold]


def level_achievement(level: UserLevel) -> AchievementDefinition:
    if level == UserLevel.LEGEND:
        rarity = AchievementRarity.LEGENDARY
    elif level == UserLevel.MASTER:
        rarity = AchievementRarity.EPIC
    else:
        rarity = AchievementRarity.RARE
    return AchievementDefinition(
        f"level_{level.value}", f"Reached {level.label}", "Your intellectual prowess grows", level.icon, rarity
    )


def stage_achievement(stage: JourneyStage) -> AchievementDefinition:
    rarity = AchievementRarity.LEGENDARY if stage == JourneyStage.MASTERING else AchievementRarity.EPIC
    return AchievementDefinition(
        f"emotional_{stage.value}", stage.label, stage.description, "heart.text.square.fill", rarity
    )


def weekly_goal_achievement(stamp: int) -> AchievementDefinition:
    """Repeatable badge; the timestamp keeps each completion's id unique."""
    return AchievementDefinition(
        f"weekly_goal_{stamp}", "Weekly Champion", "Completed weekly discovery goal",
        "checkmark.seal.fill", AchievementRarity.RARE,
    )
