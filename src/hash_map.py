"""Separate-chaining hash map.

Each bucket is a list of (key, value) pairs. When the number of entries per
bucket exceeds the load factor the table grows to the next prime at least
CAPACITY_INCREASE_FACTOR times its current capacity.
"""

import logging

log = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20
DEFAULT_LOAD_FACTOR = 0.5
CAPACITY_INCREASE_FACTOR = 2


def is_prime(n):
    if n in (2, 3):
        return True
    if n < 2 or n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def next_prime(n):
    """Smallest prime >= n."""
    if n <= 2:
        return 2
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n


class HashMap:
    def __init__(self, capacity=DEFAULT_CAPACITY, load_factor=DEFAULT_LOAD_FACTOR):
        if load_factor <= 0:
            raise ValueError(f"load factor must be positive, got {load_factor}")
        self._capacity = capacity if capacity > 0 else DEFAULT_CAPACITY
        self._load_factor = load_factor
        self._size = 0
        self._buckets = [[] for _ in range(self._capacity)]

    def _bucket_index(self, key):
        return hash(key) % self._capacity

    def _needs_rehash(self):
        return self._size / self._capacity > self._load_factor

    def _rehash(self):
        old_buckets = self._buckets
        old_capacity = self._capacity
        self._capacity = next_prime(self._capacity * CAPACITY_INCREASE_FACTOR)
        self._buckets = [[] for _ in range(self._capacity)]
        self._size = 0
        log.debug("rehash %d -> %d buckets", old_capacity, self._capacity)
        for bucket in old_buckets:
            for key, value in bucket:
                self.put(key, value)

    def put(self, key, value):
        """Insert or replace; return the previous value, or None."""
        index = self._bucket_index(key)
        bucket = self._buckets[index]
        for i, (k, v) in enumerate(bucket):
            if k == key:
                bucket[i] = (key, value)
                return v
        bucket.append((key, value))
        self._size += 1
        if self._needs_rehash():
            self._rehash()
        return None

    def get(self, key):
        index = self._bucket_index(key)
        for k, v in self._buckets[index]:
            if k == key:
                return v
        raise KeyError(key)

    def get_or(self, key, default):
        try:
            return self.get(key)
        except KeyError:
            return default

    def remove(self, key):
        index = self._bucket_index(key)
        bucket = self._buckets[index]
        for i, (k, v) in enumerate(bucket):
            if k == key:
                bucket.pop(i)
                self._size -= 1
                return v
        return None

    def contains_key(self, key):
        index = self._bucket_index(key)
        for k, v in self._buckets[index]:
            if k == key:
                return True
        return False

    def size(self):
        return self._size

    def capacity(self):
        return self._capacity

    def is_empty(self):
        return self._size == 0

    def clear(self):
        self._buckets = [[] for _ in range(self._capacity)]
        self._size = 0

    def keys(self):
        return [k for k, v in self.items()]

    def values(self):
        return [v for k, v in self.items()]

    def items(self):
        result = []
        for bucket in self._buckets:
            result.extend(bucket)
        return result

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.contains_key(key)

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __iter__(self):
        for bucket in self._buckets:
            for k, v in bucket:
                yield k

    def __repr__(self):
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{pairs}}})"
