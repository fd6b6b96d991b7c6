"""Trip planning client for the timetable.search.ch API."""

__version__ = "0.1.0"
