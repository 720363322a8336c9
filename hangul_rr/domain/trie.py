from __future__ import annotations

"""Generic prefix tree.

Each node owns its children exclusively (plain recursive ownership) and
remembers the key path that leads to it, so `all_path()` can report full keys
without rebuilding them.

Children are visited in sorted key order, matching an ordered map, so keys
must be both hashable and mutually orderable (str, int, tuples of those).
"""

from typing import Any, Generic, Iterable, Optional, Protocol, TypeVar


class _OrderedKey(Protocol):
    def __hash__(self) -> int: ...

    def __lt__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=_OrderedKey)
V = TypeVar("V")


class Trie(Generic[K, V]):
    __slots__ = ("_path", "_value", "_children", "_frozen")

    def __init__(self, path: tuple[K, ...] = ()) -> None:
        self._path: tuple[K, ...] = tuple(path)
        self._value: Optional[V] = None
        self._children: dict[K, Trie[K, V]] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def path(self) -> tuple[K, ...]:
        return self._path

    @property
    def value(self) -> Optional[V]:
        return self._value

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, key: Iterable[K], value: V) -> None:
        if self._frozen:
            raise TypeError("Trie is frozen; insert() is not allowed")

        node = self
        for k in key:
            child = node._children.get(k)
            if child is None:
                child = Trie(node._path + (k,))
                node._children[k] = child
            node = child
        node._value = value

    def freeze(self) -> Trie[K, V]:
        """Make this node and every descendant immutable; returns self."""
        self._frozen = True
        for child in self._children.values():
            child.freeze()
        return self

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_subtree(self, key: Iterable[K]) -> Optional[Trie[K, V]]:
        node = self
        for k in key:
            node = node._children.get(k)
            if node is None:
                return None
        return node

    def get(self, key: Iterable[K]) -> Optional[V]:
        node = self.get_subtree(key)
        return None if node is None else node._value

    def all(self) -> list[V]:
        """Every value stored at or below this node (depth first)."""
        return [v for _, v in self.all_path()]

    def all_path(self) -> list[tuple[tuple[K, ...], V]]:
        ret: list[tuple[tuple[K, ...], V]] = []
        if self._value is not None:
            ret.append((self._path, self._value))
        for k in sorted(self._children):
            ret.extend(self._children[k].all_path())
        return ret

    def __len__(self) -> int:
        return len(self.all_path())

    def __repr__(self) -> str:
        return "Trie(path={!r}, value={!r}, children={})".format(
            self._path, self._value, len(self._children)
        )

    # ------------------------------------------------------------------
    # String keys
    # ------------------------------------------------------------------

    def insert_str(self, token: str, value: V) -> None:
        self.insert(token, value)  # type: ignore[arg-type]

    def get_str(self, token: str) -> Optional[V]:
        return self.get(token)  # type: ignore[arg-type]

    def with_prefix(self, token: str) -> list[tuple[str, V]]:
        """Every (string, value) pair reachable below the node for `token`."""
        sub = self.get_subtree(token)  # type: ignore[arg-type]
        if sub is None:
            return []
        return [("".join(path), v) for path, v in sub.all_path()]  # type: ignore[arg-type]
