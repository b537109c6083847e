"""Identifiers in the document-store object id form: 12 bytes, 24 hex characters."""
import os
import re
import struct
import time

OBJECT_ID_LENGTH = 24

_object_id_re = re.compile(r'[0-9a-fA-F]{24}')


def new_object_id() -> str:
    # 4-byte timestamp followed by 8 random bytes, so ids sort roughly by creation time
    return (struct.pack('>I', int(time.time()) & 0xFFFFFFFF) + os.urandom(8)).hex()


def is_valid_object_id(value) -> bool:
    return isinstance(value, str) and _object_id_re.fullmatch(value) is not None
