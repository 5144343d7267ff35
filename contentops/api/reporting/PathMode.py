"""Path mode enum for report options."""

from enum import Enum


class PathMode(str, Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
