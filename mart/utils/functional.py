# mart/utils/functional.py
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
A = TypeVar("A")


def for_each(iterable: Iterable[T], fn: Callable[[T], None]) -> None:
    for element in iterable:
        fn(element)


def reduce(iterable: Iterable[T], initializer: A, fn: Callable[[A, T], A]) -> A:
    """
    Fold `iterable` into a single value, starting from `initializer`.
    Unlike functools.reduce the initializer is required, so an empty
    iterable simply returns it.
    """
    accumulator = initializer

    def step(element: T) -> None:
        nonlocal accumulator
        accumulator = fn(accumulator, element)

    for_each(iterable, step)
    return accumulator


def concat_strings(strings: Iterable[str]) -> str:
    return reduce(strings, "", lambda acc, s: acc + s)
