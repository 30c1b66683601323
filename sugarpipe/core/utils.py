import types
from collections.abc import Iterable
from typing import Any


def ensure_iterable(obj: Any) -> Iterable[Any]:
    """
    Turns whatever an itemwise stage returned into the items it stands for.

    A generator, list or tuple is a batch of items and comes back as is.
    `None` means "nothing" and becomes an empty tuple. Any other value,
    strings and dicts included, is a single item.
    """
    if obj is None:
        return ()
    if isinstance(obj, (list, tuple, types.GeneratorType)):
        return obj
    return (obj,)
