# prioritykit/db/models/__init__.py

from .product import Product
from .idea import Idea
from .feature import Feature, Task
from .release import Release

__all__ = [
    "Product",
    "Idea",
    "Feature",
    "Task",
    "Release",
]
