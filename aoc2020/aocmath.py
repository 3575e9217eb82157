"""Small arithmetic helpers over sequences of numbers."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable
from functools import reduce
from numbers import Number
from typing import TypeVar

N = TypeVar("N", bound=Number)


def sums_to(numbers: Iterable[N], target: N) -> bool:
    """Return True if the numbers add up exactly to ``target``."""
    # Plain left-to-right addition, so float results do not depend on
    # compensated summation in newer interpreters.
    return reduce(operator.add, numbers, 0) == target


def product(numbers: Iterable[N]) -> N:
    """Return the product of the numbers; 1 for an empty sequence."""
    return math.prod(numbers, start=1)