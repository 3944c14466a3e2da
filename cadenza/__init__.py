"""
Cadenza - Habit state and derivation engine
"""
__version__ = "0.1.0"
