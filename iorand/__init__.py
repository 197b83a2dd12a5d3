"""
Byte-stream source subpackage.
"""

from .stream import ByteStreamSource, BYTE_ORDERS

__all__ = [
    'ByteStreamSource',
    'BYTE_ORDERS'
]
