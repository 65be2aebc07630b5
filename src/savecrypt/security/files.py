"""Whole-file persistence of encrypted save blobs.

Both directions materialize the full blob in memory. I/O failures are raised
unchanged; only the cipher layer raises savecrypt errors.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from .cipher import Secret, seal, unseal

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def encrypt_to_file(path: PathLike, plaintext: bytes, secret: Secret) -> None:
    """Encrypt ``plaintext`` and write the blob to ``path``, replacing any existing file."""
    blob = seal(plaintext, secret)
    with open(path, "wb") as outf:
        outf.write(blob)
    logger.debug("Wrote %d encrypted bytes to %s", len(blob), path)


def decrypt_from_file(path: PathLike, secret: Secret) -> bytes:
    """Read ``path`` and decrypt its contents."""
    blob = Path(path).read_bytes()
    logger.debug("Read %d bytes from %s", len(blob), path)
    return unseal(blob, secret)
