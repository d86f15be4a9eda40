"""randstore Storage Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from randstore_core.storage.backend import EOF, RandomAccessStore, StoreConfig, StoreState
from randstore_core.storage.memory import MemoryStore
from randstore_core.storage.file import FileStore

__all__ = ["EOF", "RandomAccessStore", "StoreConfig", "StoreState", "MemoryStore", "FileStore"]
