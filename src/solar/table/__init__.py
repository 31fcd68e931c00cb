from .daylight import daylight_table, day_lengths_hours, polar_dates

__all__ = ["daylight_table", "day_lengths_hours", "polar_dates"]
