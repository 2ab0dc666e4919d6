from .kv import KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore, StorageKeys

__all__ = ["KeyValueStore", "MemoryKeyValueStore", "SQLiteKeyValueStore", "StorageKeys"]
