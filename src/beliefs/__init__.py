from .store import BeliefChange, BeliefTracker, TrackedBelief

__all__ = ["BeliefChange", "BeliefTracker", "TrackedBelief"]
