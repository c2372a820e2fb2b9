# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "Title shown above the task list (default: Task Manager Pro).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING; the log file is always DEBUG).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_STORAGE_PATH": "Key-value SQLite path (default: <data_dir>/storage.sqlite3).",
    # Initial view state
    "TASKPAD_DEFAULT_FILTER": "all | completed | pending (default: all).",
    "TASKPAD_DEFAULT_SORT": "date-asc | date-desc | priority-high | priority-low | none (default: date-asc).",
    # Behaviour
    "TASKPAD_CONFIRM_DELETE": "Ask before deleting a task (true/false, default: true).",
}
