# Models package init: importing it registers every table on Base.metadata
from ideaboard.models.idea import Idea
from ideaboard.models.like import Like

__all__ = ["Idea", "Like"]
