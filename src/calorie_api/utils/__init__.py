"""Utility functions."""

from .dates import filter_entries_by_date, filter_entries_since, parse_date, utc_now

__all__ = ["filter_entries_by_date", "filter_entries_since", "parse_date", "utc_now"]
