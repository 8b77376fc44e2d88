import threading

from pycollect import logconfig

_INIT_LOCK = threading.Lock()
_is_initialized = False


def init(force_reload: bool = False) -> None:
    """
    Configure pycollect's logging from the ``PYCOLLECT_*`` environment variables.

    Importing pycollect leaves logging untouched; applications opt in by calling
    ``init()``. It may be called more than once. Only the first invocation has any
    effect unless ``force_reload=True``.
    """
    global _is_initialized

    with _INIT_LOCK:
        if _is_initialized and not force_reload:
            return

        logconfig.configure_root_logger()
        _is_initialized = True
