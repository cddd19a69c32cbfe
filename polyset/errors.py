"""Error kinds raised by the dispatch layer.

Only one error originates here. Anything a representation raises from its own
capability calls (e.g. ``TypeError`` for an unhashable element) propagates to
the caller untouched.
"""

from typing import Any


class UnsupportedRepresentation(ValueError):
    """Raised when a value is not a set of any registered representation.

    Attributes:
        value: The offending operand.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"unsupported set: {value!r}")
        self.value = value
