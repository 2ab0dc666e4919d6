from .client import HNClient, NewsFetchError
from .models import HNComment, HNStory

__all__ = ["HNClient", "HNComment", "HNStory", "NewsFetchError"]
