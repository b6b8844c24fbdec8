"""Reading a stream line by line in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

BUFF_SIZE = 32


def iter_lines(stream: IO[AnyStr], chunk_size: int = BUFF_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of a text or binary stream without their newline.

    The stream is read chunk_size items at a time. A final line that is not
    terminated by a newline is still yielded unless it is empty.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    pending = None
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        newline = b"\n" if isinstance(chunk, bytes) else "\n"
        pending = chunk if pending is None else pending + chunk
        *complete, pending = pending.split(newline)
        yield from complete
    if pending:
        yield pending