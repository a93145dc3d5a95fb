# A single fingerprint reduced modulo several pairwise-distinct prime table
# sizes stands in for k independent hash functions.
import logging
import operator
from typing import Iterable, Iterator

from prime_bloom.hashing import (
    BASE,
    HASHERS,
    MODULUS,
    Hasher,
    int32_polynomial_hash,
    polynomial_hash,
)

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    pass


class BloomFilter:
    def __init__(
        self, table_sizes: Iterable[int], hasher: Hasher = polynomial_hash
    ):
        table_sizes = tuple(table_sizes)
        if not table_sizes:
            raise InvalidConfiguration("at least one table size is required")
        sizes = []
        for size in table_sizes:
            if isinstance(size, bool):
                raise InvalidConfiguration(
                    f"table size {size!r} is not an integer"
                )
            try:
                size = operator.index(size)
            except TypeError:
                raise InvalidConfiguration(
                    f"table size {size!r} is not an integer"
                ) from None
            if size <= 0:
                raise InvalidConfiguration(
                    f"table size {size} must be positive"
                )
            sizes.append(size)
        table_sizes = tuple(sizes)
        self.table_sizes = table_sizes
        self.tables = [[False] * size for size in table_sizes]
        self.hasher = hasher
        logger.debug(
            "created filter with %d tables of sizes %s",
            len(table_sizes),
            table_sizes,
        )

    def __len__(self) -> int:
        return len(self.tables)

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def indices(self, key: str) -> Iterator[int]:
        fingerprint = self.hasher(key)
        for size in self.table_sizes:
            yield fingerprint % size

    def add(self, key: str) -> None:
        for table, index in zip(self.tables, self.indices(key)):
            table[index] = True

    def update(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.add(key)

    def contains(self, key: str) -> bool:
        for table, index in zip(self.tables, self.indices(key)):
            # one unset bit means the key was never added
            if not table[index]:
                return False
        return True


__all__ = [
    "BASE",
    "BloomFilter",
    "HASHERS",
    "Hasher",
    "InvalidConfiguration",
    "MODULUS",
    "int32_polynomial_hash",
    "polynomial_hash",
]
