# src/blissword/core/store.py
"""
The shared edit buffer, stored in Redis.

There is one buffer per prefix. It is only ever written whole: apply() reads
the current value, runs a pure buffer operation and SETs the result, so a
reader sees either the old buffer or the new one.
"""

import json

import redis

from blissword.core.buffer import EditBuffer


DEFAULT_PREFIX = "blissword"


class BufferStore:
    def __init__(self, client: redis.Redis, prefix: str = DEFAULT_PREFIX):
        self.client = client
        self.prefix = prefix

    def _buffer_key(self) -> str:
        return f"{self.prefix}:buffer"

    def get(self) -> EditBuffer:
        data = self.client.get(self._buffer_key())
        if data is None:
            return EditBuffer()
        if isinstance(data, bytes):
            data = data.decode()
        return EditBuffer.from_dict(json.loads(data))

    def put(self, buffer: EditBuffer) -> EditBuffer:
        self.client.set(self._buffer_key(), json.dumps(buffer.to_dict()))
        return buffer

    def apply(self, operation, *args, **kwargs) -> EditBuffer:
        """Run operation(current, *args, **kwargs) and store what it returns."""
        current = self.get()
        updated = operation(current, *args, **kwargs)
        if updated is current:
            return current
        return self.put(updated)

    def clear(self) -> None:
        """Drop the stored buffer. Useful for tests."""
        self.client.delete(self._buffer_key())
