from typing import Any, Hashable, Iterable, Optional

from collectionkit.core.errors import OutOfBoundsError


def strict_equals(left: Any, right: Any) -> bool:
    """
    Identity, or same concrete type and equal value, applied all the way
    down: ``1``, ``1.0`` and ``True`` stay apart, and so do ``[1]`` and
    ``[True]``.

    Lists and tuples compare element by element in order. Dicts compare
    entry by entry (keys matched with :func:`strict_key`, order ignored as
    for a plain ``dict``); sets compare their strict keys.
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False

    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(
            strict_equals(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict):
        if len(left) != len(right):
            return False
        others = {strict_key(key): value for key, value in right.items()}
        for key, value in left.items():
            slot = strict_key(key)
            if slot not in others or not strict_equals(value, others[slot]):
                return False
        return True
    if isinstance(left, (set, frozenset)):
        return {strict_key(item) for item in left} == {
            strict_key(item) for item in right
        }
    return left == right


def strict_key(key: Hashable) -> Hashable:
    """
    Hashable stand-in for ``key`` that carries the type of every nested
    element, so keys are only merged when :func:`strict_equals` holds.
    """
    if isinstance(key, tuple):
        return (type(key), tuple(strict_key(item) for item in key))
    if isinstance(key, frozenset):
        return (type(key), frozenset(strict_key(item) for item in key))
    return (type(key), key)


def strict_index(values: Iterable[Any], element: Any) -> Optional[int]:
    for index, value in enumerate(values):
        if strict_equals(value, element):
            return index
    return None


def check_index(index, upper: int) -> int:
    """Validate ``0 <= index < upper`` and return the index unchanged."""
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(
            f"indices must be integers, not {index.__class__.__name__}"
        )
    if index < 0 or index >= upper:
        raise OutOfBoundsError("Index out of bounds", items=index)
    return index
