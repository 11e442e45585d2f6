# datacompare/transforms/__init__.py
from .base_transform import CompareTransform

__all__ = ['CompareTransform']
