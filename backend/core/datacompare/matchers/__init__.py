# datacompare/matchers/__init__.py
from .base_matcher import CompareMatcher

__all__ = ['CompareMatcher']
