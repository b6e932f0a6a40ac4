"""
Dicephrase Security - Wiping entropy buffers once they are spent.
"""

from typing import Union
import numpy as np


def secure_zero(data: Union[np.ndarray, bytearray, bytes]) -> None:
    """
    Overwrite an entropy buffer with zeros (best-effort).

    Python may already hold copies of the data elsewhere, so this only
    shortens the lifetime of the bytes we own. Immutable ``bytes`` and
    read-only arrays are left untouched.

    Args:
        data: numpy array or bytearray holding spent entropy
    """
    if isinstance(data, np.ndarray):
        if data.flags.writeable:
            data.fill(0)
    elif isinstance(data, bytearray):
        data[:] = bytes(len(data))
