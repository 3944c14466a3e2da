"""
Business logic services
"""
from . import notifications
from . import categories
from . import habits
from . import navigation
from . import scheduler

__all__ = [
    'notifications',
    'categories',
    'habits',
    'navigation',
    'scheduler'
]
