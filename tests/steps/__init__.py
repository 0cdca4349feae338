"""Aggregate pytest-bdd step definitions for path features."""

from .path_algebra import *  # noqa: F403
from .path_buffer import *  # noqa: F403
from .policy import *  # noqa: F403

# Re-export all imported step definitions so ``from tests.steps import *``
# makes them available to scenario modules during collection.
__all__ = [
    name
    for name in globals()
    if not name.startswith("_") and name != "annotations"
]
