"""
Application constants
"""

# Number of entries shown in a habit's recent history
DEFAULT_RECENT_ENTRIES_LIMIT = 7

# Day rollover job runs at local midnight
ROLLOVER_HOUR = 0
ROLLOVER_MINUTE = 0

# Fallback shown for habits whose category was removed
UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"
UNCATEGORIZED_COLOR = "gray"
UNCATEGORIZED_ICON = "questionmark.circle"
