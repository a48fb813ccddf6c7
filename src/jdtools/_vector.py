from __future__ import annotations

import math
import operator
from typing import Any, Union

import numpy as np

IntLike = Union[int, "np.ndarray"]
NumberLike = Union[float, "np.ndarray"]


def _scalar_number(value: Any) -> Any:
    # Integers stay exact, everything else goes through float; NaN if uncastable.
    try:
        return operator.index(value)
    except TypeError:
        pass
    if isinstance(value, (str, bytes)):
        try:
            return int(value)
        except ValueError:
            pass
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def as_number(value: Any) -> Any:
    """
    Numeric cast of a scalar or array-like.

    Scalars become Python ``int`` (integral input, including numeric
    strings) or ``float``; anything that cannot be cast becomes NaN.
    Sequences become arrays, with non-numeric dtypes cast element-wise.
    """
    if np.ndim(value) == 0:
        return _scalar_number(value.item() if isinstance(value, np.ndarray) else value)
    arr = np.asarray(value)
    if arr.dtype.kind in "iuf":
        return arr
    if arr.dtype.kind == "b":
        return arr.astype(np.int64)
    cast = [_scalar_number(v) for v in arr.ravel().tolist()]
    return np.array(cast).reshape(arr.shape)


def where(cond: Any, a: Any, b: Any) -> Any:
    # Plain branch for scalars so Python ints stay Python ints.
    if np.ndim(cond) == 0 and np.ndim(a) == 0 and np.ndim(b) == 0:
        return a if cond else b
    return np.where(cond, a, b)


def or_default(value: Any, default: int) -> Any:
    """Cast `value`, replacing a missing or zero value by `default` (element-wise for arrays)."""
    if value is None:
        return default
    value = as_number(value)
    if np.ndim(value) == 0:
        return value or default
    return np.where(value == 0, default, value)
