"""Module whose typed enum is invalid; importing it fails."""

from enum import Enum

from enumshift import typed_value_set


@typed_value_set
class Shipping(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    FAST = "express"
