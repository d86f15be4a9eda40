"""randstore Codecs.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from randstore_core.codec.mutf8 import (
    MAX_ENCODED_LENGTH,
    decode_modified_utf8,
    encode_modified_utf8,
    encoded_length,
    from_utf16_units,
    utf16_units,
)
from randstore_core.codec import numeric

__all__ = [
    "numeric",
    "MAX_ENCODED_LENGTH",
    "decode_modified_utf8",
    "encode_modified_utf8",
    "encoded_length",
    "from_utf16_units",
    "utf16_units",
]
