"""Domain enumerations for the product catalog."""

from enum import Enum


class Color(Enum):
    """Categorical product color."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(Enum):
    """Categorical product size."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
