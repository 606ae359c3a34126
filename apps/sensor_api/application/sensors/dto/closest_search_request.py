"""Closest Search Request DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClosestSearchRequest:
    """근접 검색 요청 DTO (파싱 전 원본 문자열)."""

    location: str
    radius: str
