# datacompare/utils/__init__.py
from .number_utils import NumberUtils
from .time_utils import TimeUtils, VALID_UNITS

__all__ = ['NumberUtils', 'TimeUtils', 'VALID_UNITS']
