"""
Navigation module - selection state and the filtered view it produces
"""
from .service import NavigationState, visible_habits

__all__ = [
    'NavigationState',
    'visible_habits'
]
