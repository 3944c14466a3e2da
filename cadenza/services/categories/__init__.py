"""
Categories module - the category store and its display fallback
"""
from .service import CategoryStore, UNCATEGORIZED

__all__ = [
    'CategoryStore',
    'UNCATEGORIZED'
]
