"""Flat-file persistence for account records."""

from .records import LoadResult, RecordStore

__all__ = ["LoadResult", "RecordStore"]
