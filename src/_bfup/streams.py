import pathlib
from functools import wraps

CHUNK_SIZE = 4096


def takes_stream(i, mode):
    """
    Decorator for functions taking a stream as positional argument i.
    When the function is instead given a path (str or pathlib.Path), the
    file is opened with the given mode for the duration of the call.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode, encoding="utf-8") as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def iter_chars(stream, chunk_size=CHUNK_SIZE):
    """
    Lazily iterate over the characters of a text stream.

    Exceptions raised by the stream (e.g. OSError or UnicodeDecodeError)
    propagate out of the iterator at the point they occur.
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield from chunk
