"""Non-blocking calling conventions over the synchronous core.

Nothing here re-implements cryptography: every function hands a core
operation to a worker thread, so results are bit-identical to the blocking
calls. Two styles are offered:

- ``*_async`` coroutines built on :func:`asyncio.to_thread`
- :func:`submit`, which runs any operation on a shared thread pool and reports
  completion through a ``callback(error, result)``
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from savecrypt.core.config import get_max_workers

from .cipher import Secret, decrypt, decrypt_with_key, encrypt, encrypt_with_key
from .files import PathLike, decrypt_from_file, encrypt_to_file
from .kdf import DerivedKey, Passphrase, derive_key

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[BaseException], Any], None]

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


async def derive_key_async(passphrase: Passphrase, salt: Optional[bytes] = None) -> DerivedKey:
    return await asyncio.to_thread(derive_key, passphrase, salt)


async def encrypt_async(plaintext: bytes, passphrase: Passphrase) -> bytes:
    return await asyncio.to_thread(encrypt, plaintext, passphrase)


async def decrypt_async(blob: bytes, passphrase: Passphrase) -> bytes:
    return await asyncio.to_thread(decrypt, blob, passphrase)


async def encrypt_with_key_async(plaintext: bytes, key: DerivedKey) -> bytes:
    return await asyncio.to_thread(encrypt_with_key, plaintext, key)


async def decrypt_with_key_async(blob: bytes, key: DerivedKey) -> bytes:
    return await asyncio.to_thread(decrypt_with_key, blob, key)


async def encrypt_to_file_async(path: PathLike, plaintext: bytes, secret: Secret) -> None:
    await asyncio.to_thread(encrypt_to_file, path, plaintext, secret)


async def decrypt_from_file_async(path: PathLike, secret: Secret) -> bytes:
    return await asyncio.to_thread(decrypt_from_file, path, secret)


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            workers = get_max_workers()
            logger.debug("Starting savecrypt worker pool with %d workers", workers)
            _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="savecrypt")
        return _executor


def submit(fn: Callable[..., Any], *args: Any, callback: Optional[Callback] = None, **kwargs: Any) -> Future:
    """
    Run ``fn(*args, **kwargs)`` on the worker pool.

    Returns the :class:`~concurrent.futures.Future`. When ``callback`` is
    given it is called once the work finishes as ``callback(error, result)``;
    exactly one of the two is ``None``. The callback runs on the worker thread
    (or on the caller's thread if the work already finished).
    """
    future = _get_executor().submit(fn, *args, **kwargs)
    if callback is not None:

        def _done(fut: Future) -> None:
            error = fut.exception()
            if error is not None:
                callback(error, None)
            else:
                callback(None, fut.result())

        future.add_done_callback(_done)
    return future


def shutdown(wait: bool = True) -> None:
    """Stop the worker pool; a later :func:`submit` starts a new one."""
    global _executor
    with _executor_lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait)
