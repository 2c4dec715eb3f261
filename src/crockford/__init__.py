"""Crockford's Base32 symbol encoding for non-negative integers."""

from crockford.api import *  # noqa
from crockford.api import __version__  # noqa
