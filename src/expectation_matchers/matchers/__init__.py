"""Matcher domain exports."""

from .matcher_func import Matcher, MatcherFunc
from .membership import be_one_of

__all__ = ["Matcher", "MatcherFunc", "be_one_of"]
