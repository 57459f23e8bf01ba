"""Lazy, closeable sequences of logical resource names."""

import itertools
from typing import Callable, Iterable, Iterator, Sequence


class EntryStream:
    """Single-pass sequence of logical names that owns backend handles.

    An EntryStream wraps a lazy iterator and a list of close callbacks. The
    callbacks release whatever the producer holds open (archive files, walk
    generators) and run exactly once, when close() is called or when the
    stream is used as a context manager and the block exits.

    Streams are not restartable. Once drained or closed, a fresh call must
    be made to enumerate again.

    Example:
        >>> with enumerator.stream("io/app") as names:
        ...     for name in names:
        ...         print(name)
    """

    def __init__(
        self,
        entries: Iterable[str],
        on_close: Sequence[Callable[[], None]] = (),
    ):
        """Initialize with an entry iterable and its close callbacks.

        Args:
            entries: Iterable producing logical names, consumed lazily
            on_close: Callbacks run in order when the stream is closed
        """
        self._iterator = iter(entries)
        self._on_close = list(on_close)
        self._closed = False

    @classmethod
    def empty(cls) -> "EntryStream":
        """Return a stream with no entries."""
        return cls(())

    @classmethod
    def concat(cls, streams: Sequence["EntryStream"]) -> "EntryStream":
        """Chain streams in order; closing the result closes every one of them."""
        return cls(
            itertools.chain.from_iterable(streams),
            on_close=[stream.close for stream in streams],
        )

    @property
    def closed(self) -> bool:
        """True once close() has run."""
        return self._closed

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._closed:
            raise ValueError("Entry stream is closed")
        return next(self._iterator)

    def filter(self, predicate: Callable[[str], bool]) -> "EntryStream":
        """Return a stream yielding only names accepted by predicate."""
        return EntryStream(filter(predicate, self), on_close=[self.close])

    def distinct(self) -> "EntryStream":
        """Return a stream that yields each name only the first time it is seen."""
        def unique() -> Iterator[str]:
            seen: set[str] = set()
            for name in self:
                if name not in seen:
                    seen.add(name)
                    yield name

        return EntryStream(unique(), on_close=[self.close])

    def to_list(self) -> list[str]:
        """Drain the stream into a list and close it."""
        with self:
            return list(self)

    def close(self) -> None:
        """Release the resources held by this stream.

        Every callback runs even if an earlier one fails. The first failure
        is re-raised after all callbacks have run.

        Raises:
            CloseError: If a backend handle could not be released
        """
        if self._closed:
            return
        self._closed = True

        # Finalize generators first so their cleanup runs before the handles go.
        close_iterator = getattr(self._iterator, "close", None)
        callbacks = ([close_iterator] if close_iterator else []) + self._on_close

        first_error: BaseException | None = None
        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

    def __enter__(self) -> "EntryStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
