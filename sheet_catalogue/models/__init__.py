"""
Data models for catalogue ingestion.

This module contains pure data classes with no business logic.
"""

from .product import DEFAULT_CATEGORY, CategoryMatch, ProductRecord, SectionState

__all__ = ['DEFAULT_CATEGORY', 'CategoryMatch', 'ProductRecord', 'SectionState']
