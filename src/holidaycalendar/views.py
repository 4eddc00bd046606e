from collections.abc import Hashable, Iterable, Iterator, Set
from typing import Generic, TypeVar

from .exceptions import UnsupportedOperationError

T = TypeVar('T', bound=Hashable)


def _unsupported(method_name: str):
    def f(self, *args, **kwargs):
        raise UnsupportedOperationError(f'{type(self).__name__} is read-only. {method_name}() is not supported.')
    f.__name__ = method_name
    return f


class ReadOnlySet(Set, Generic[T]):
    '''
    Insertion ordered set view. Every mutating method of the set protocol raises UnsupportedOperationError.
    '''
    __slots__ = ('_items',)

    def __init__(self, items: Iterable[T]=()):
        self._items: dict[T, None] = dict.fromkeys(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self._items)!r})'

    add = _unsupported('add')
    discard = _unsupported('discard')
    remove = _unsupported('remove')
    pop = _unsupported('pop')
    clear = _unsupported('clear')
    update = _unsupported('update')
    difference_update = _unsupported('difference_update')
    intersection_update = _unsupported('intersection_update')
    symmetric_difference_update = _unsupported('symmetric_difference_update')
    __ior__ = _unsupported('__ior__')
    __iand__ = _unsupported('__iand__')
    __isub__ = _unsupported('__isub__')
    __ixor__ = _unsupported('__ixor__')
