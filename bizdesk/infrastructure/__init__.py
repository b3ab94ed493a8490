"""Infrastructure adapters: record stores, database engine, settings and logging."""
