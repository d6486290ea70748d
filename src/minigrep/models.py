"""Data models for minigrep."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Resolved settings for a single search invocation."""

    query: str
    file_path: str
    ignore_case: bool = False
