"""Daily streaks, experience points, levels and achievements."""

from datetime import datetime, timedelta
from typing import Callable, Optional

import structlog
from pydantic import ValidationError

from journey.achievements import (
    DAILY_MILESTONES,
    DISCOVERY_MILESTONES,
    FIRST_VISIT,
    STREAK_MILESTONES,
    AchievementDefinition,
    level_achievement,
    reached,
    stage_achievement,
    weekly_goal_achievement,
)
from journey.models import (
    DEFAULT_WEEKLY_GOAL,
    JourneyStage,
    JourneyState,
    UnlockedAchievement,
    UserLevel,
)
from shared_types import AchievementRarity
from storage import KeyValueStore, StorageKeys

logger = structlog.get_logger().bind(source="journey")

DISCOVERY_XP = 10
LONGEST_STREAK_XP = 50
LEVEL_UP_BONUS_XP = 100
WEEKLY_GOAL_XP = 100
STREAK_BREAK_PENALTY_XP = 20
STREAK_PENALTY_MIN = 7
WEEK = timedelta(days=7)


def calendar_days_between(earlier: datetime, later: datetime) -> int:
    """Whole calendar days from *earlier* to *later*, ignoring time of day."""
    return (later.date() - earlier.date()).days


class JourneyTracker:
    """Gamification bookkeeping over a persisted ``JourneyState``.

    Level policy: ``award_experience`` advances at most one level per call.
    The level-up bonus is added directly and does not re-check thresholds, and
    the level achievement itself carries no rarity XP. A large award that
    crosses two thresholds leaves the second level for the next award.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        weekly_goal: int = DEFAULT_WEEKLY_GOAL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.kv = kv
        self.clock = clock
        self.state = self._load()
        self.state.weekly_goal = weekly_goal
        self.should_show_daily_wisdom = False
        self._check_weekly_reset()

    # --- persistence ---

    def _load(self) -> JourneyState:
        data = self.kv.get_json(StorageKeys.JOURNEY_STATE) or {}
        data.pop("achievement_history", None)
        try:
            state = JourneyState.model_validate(data)
        except ValidationError as e:
            logger.warning("journey_load_failed", error=str(e))
            state = JourneyState()

        achievements = self.kv.get_json(StorageKeys.ACHIEVEMENTS, default=[])
        try:
            state.achievement_history = [UnlockedAchievement.model_validate(a) for a in achievements]
        except (ValidationError, TypeError) as e:
            logger.warning("achievements_load_failed", error=str(e))
        return state

    def _save(self) -> None:
        self.kv.set_json(
            StorageKeys.JOURNEY_STATE,
            self.state.model_dump(mode="json", exclude={"achievement_history"}),
        )

    def _save_achievements(self) -> None:
        self.kv.set_json(
            StorageKeys.ACHIEVEMENTS,
            [a.model_dump(mode="json") for a in self.state.achievement_history],
        )

    def _week_start(self) -> Optional[datetime]:
        raw = self.kv.get_json(StorageKeys.WEEK_START)
        if not raw:
            return None
        try:
            return datetime.fromisoformat(raw)
        except (TypeError, ValueError):
            return None

    def _stamp_week_start(self, now: datetime) -> None:
        self.kv.set_json(StorageKeys.WEEK_START, now.isoformat())

    def _check_weekly_reset(self) -> None:
        now = self.clock()
        week_start = self._week_start()
        if week_start is None:
            self._stamp_week_start(now)
            return
        if now - week_start >= WEEK:
            logger.info("weekly_progress_reset", previous=self.state.weekly_progress)
            self.state.weekly_progress = 0
            self._stamp_week_start(now)
            self._save()

    # --- daily visit ---

    def check_daily_visit(self) -> None:
        """Advance, keep or restart the streak based on calendar days since the last visit."""
        now = self.clock()
        s = self.state

        if s.last_visit_date is None:
            s.current_streak = 1
            s.total_days_engaged = 1
            s.longest_streak = max(s.longest_streak, 1)
            s.daily_discoveries = 0
            self.should_show_daily_wisdom = True
            self._unlock(FIRST_VISIT)
        else:
            days = calendar_days_between(s.last_visit_date, now)
            if days <= 0:
                return
            if days == 1:
                s.current_streak += 1
                s.total_days_engaged += 1
                s.daily_discoveries = 0
                self.should_show_daily_wisdom = True
                for definition in reached(STREAK_MILESTONES, s.current_streak):
                    self._unlock(definition)
                if s.current_streak > s.longest_streak:
                    s.longest_streak = s.current_streak
                    self.award_experience(LONGEST_STREAK_XP, reason="New longest streak!")
            else:
                if s.current_streak > 0:
                    self._handle_streak_break()
                s.current_streak = 1
                s.total_days_engaged += 1
                s.daily_discoveries = 0
                self.should_show_daily_wisdom = True

        s.last_visit_date = now
        self._save()
        logger.debug("daily_visit", streak=s.current_streak, total_days=s.total_days_engaged)

    def _handle_streak_break(self) -> None:
        broken = self.state.current_streak
        if broken >= STREAK_PENALTY_MIN:
            self.state.experience_points = max(0, self.state.experience_points - STREAK_BREAK_PENALTY_XP)
        logger.info("streak_broken", streak=broken)

    # --- discoveries ---

    def record_discovery(self, total_discovered: int) -> None:
        """Count one discovery.

        Args:
            total_discovered: lifetime discovery count, used for global
                milestones and the emotional journey stage.
        """
        s = self.state
        s.daily_discoveries += 1
        s.weekly_progress += 1

        self.award_experience(DISCOVERY_XP, reason="Discovery")

        for definition in reached(DISCOVERY_MILESTONES, total_discovered):
            self._unlock(definition)
        for definition in reached(DAILY_MILESTONES, s.daily_discoveries):
            self._unlock(definition)

        self._update_journey_stage(total_discovered)

        if s.weekly_progress >= s.weekly_goal:
            self._complete_weekly_goal()

        self._save()

    def _update_journey_stage(self, total_discovered: int) -> None:
        stage = JourneyStage.for_discoveries(total_discovered)
        if stage.rank <= self.state.emotional_journey_stage.rank:
            return
        self.state.emotional_journey_stage = stage
        logger.info("journey_stage_advanced", stage=stage.value)
        self._unlock(stage_achievement(stage))

    def _complete_weekly_goal(self) -> None:
        now = self.clock()
        self._unlock(weekly_goal_achievement(int(now.timestamp() * 1000)))
        self.award_experience(WEEKLY_GOAL_XP, reason="Weekly Goal Complete!")
        self.state.weekly_progress = 0
        self._stamp_week_start(now)

    # --- experience & achievements ---

    def award_experience(self, points: int, reason: str = "") -> None:
        s = self.state
        s.experience_points += points
        logger.debug("xp_awarded", points=points, reason=reason, total=s.experience_points)

        next_level = s.user_level.next_level()
        if next_level is not None and s.experience_points >= next_level.required_xp:
            self._level_up(next_level)

        self._save()

    def _level_up(self, level: UserLevel) -> None:
        self.state.user_level = level
        logger.info("level_up", level=level.value)
        self._unlock(level_achievement(level), award_xp=False)
        self.state.experience_points += LEVEL_UP_BONUS_XP

    def unlock_achievement(
        self,
        achievement_id: str,
        name: str,
        description: str,
        icon_name: str,
        rarity: AchievementRarity,
    ) -> bool:
        """Unlock once by id and award rarity XP. Returns False if already unlocked."""
        return self._unlock(AchievementDefinition(achievement_id, name, description, icon_name, rarity))

    def _unlock(self, definition: AchievementDefinition, award_xp: bool = True) -> bool:
        if self.state.has_achievement(definition.id):
            return False

        self.state.achievement_history.append(
            UnlockedAchievement(
                id=definition.id,
                name=definition.name,
                description=definition.description,
                icon_name=definition.icon_name,
                unlocked_date=self.clock(),
                rarity=definition.rarity,
            )
        )
        logger.info("achievement_unlocked", id=definition.id, rarity=definition.rarity.value)
        self._save_achievements()

        if award_xp:
            self.award_experience(definition.rarity.xp_reward, reason=f"Achievement: {definition.name}")
        return True

    # --- read helpers ---

    @property
    def achievements(self) -> list[UnlockedAchievement]:
        return list(self.state.achievement_history)

    @property
    def effective_streak(self) -> int:
        """Streak as the user should see it now: 0 once a calendar day has been missed."""
        last = self.state.last_visit_date
        if last is None or calendar_days_between(last, self.clock()) > 1:
            return 0
        return self.state.current_streak

    @property
    def streak_intensity(self) -> float:
        streak = self.effective_streak
        if streak <= 0:
            return 0.0
        if streak <= 3:
            return 0.3
        if streak <= 7:
            return 0.5
        if streak <= 14:
            return 0.7
        if streak <= 30:
            return 0.85
        return 1.0

    @property
    def progress_to_next_level(self) -> float:
        next_level = self.state.user_level.next_level()
        if next_level is None:
            return 1.0
        floor = self.state.user_level.required_xp
        span = next_level.required_xp - floor
        ratio = (self.state.experience_points - floor) / span
        return min(1.0, max(0.0, ratio))

    def dismiss_daily_wisdom(self) -> None:
        self.should_show_daily_wisdom = False
