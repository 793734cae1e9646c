"""
Utilities Package

Numeric helpers shared by the models and engine.

Serialization helpers live in ``core.utils.serialization`` and are not
re-exported here: they import the models, and the models import this
package.
"""

from .numbers import is_number, is_whole, round_half_up

__all__ = [
    "is_number",
    "is_whole",
    "round_half_up",
]
