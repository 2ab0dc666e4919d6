from .models import JourneyStage, JourneyState, UnlockedAchievement, UserLevel
from .tracker import JourneyTracker

__all__ = ["JourneyStage", "JourneyState", "JourneyTracker", "UnlockedAchievement", "UserLevel"]
