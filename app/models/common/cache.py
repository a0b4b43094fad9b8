"""Key/value cache table - backing store for every cached data source."""

KV_CACHE_DDL = """
CREATE TABLE IF NOT EXISTS kv_cache (
    key VARCHAR PRIMARY KEY,
    value VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
