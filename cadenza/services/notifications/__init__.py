"""
Notifications module
Change events published to observers after every mutation command
"""
from .service import (
    ChangeKind,
    ChangeEvent,
    ChangeNotifier
)

__all__ = [
    'ChangeKind',
    'ChangeEvent',
    'ChangeNotifier'
]
