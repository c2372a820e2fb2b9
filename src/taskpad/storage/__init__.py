"""Key-value storage backends (SQLite for the app, in-memory for tests)."""
