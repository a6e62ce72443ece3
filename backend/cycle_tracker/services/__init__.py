"""Cycle prediction, calendar, settings, reminder and storage services."""
