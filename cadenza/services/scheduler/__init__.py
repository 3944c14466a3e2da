"""
Scheduler module
Background job that rolls the habit collection over to a new day
"""
from .service import start_scheduler, stop_scheduler, run_rollover

__all__ = [
    'start_scheduler',
    'stop_scheduler',
    'run_rollover'
]
