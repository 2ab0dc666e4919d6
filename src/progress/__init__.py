from .models import CategoryProgress, CategoryState, UserProgress
from .tracker import ProgressTracker

__all__ = ["CategoryProgress", "CategoryState", "ProgressTracker", "UserProgress"]
