"""Runnable RecordAdmin demonstration project."""
