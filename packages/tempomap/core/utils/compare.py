"""Three-way comparison shared by the ordered value types."""

from __future__ import annotations

from typing import Any

from tempomap.core.errors import TypeMismatchError


def compare_to(left: Any, right: Any, accepted: type | tuple[type, ...]) -> int:
    """Compare two values the way a generic, object-typed surface does.

    ``None`` orders before every value. Anything that is not one of the
    accepted types is a caller error.

    Args:
        left: Value on the left
        right: Value on the right (may be None)
        accepted: Type or types right may have

    Returns:
        -1, 0 or 1

    Raises:
        TypeMismatchError: If right is neither None nor an accepted type
    """
    if right is None:
        return 1
    if not isinstance(right, accepted):
        raise TypeMismatchError(type(left).__name__, right)
    if left < right:
        return -1
    return 0 if left == right else 1
