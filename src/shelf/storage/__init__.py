"""
Key-value storage.

Components:
- kv_store.py: InMemoryKeyValueStore and the SQLite-backed SqliteKeyValueStore
"""
