# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console logging level; never quieter than WARNING (default: INFO).",
    # Front-end
    "TASK_TRACKER_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "TASK_TRACKER_DATE_FORMAT": "strftime format for due dates in listings (default: %B %d, %Y).",
    # Storage
    "TASK_TRACKER_STORAGE_BACKEND": "sqlite | json | memory (default: sqlite).",
    "TASK_TRACKER_STORAGE_KEY": "Key the task collection is stored under (default: tasks).",
    # Paths (gitignored)
    "TASK_TRACKER_DATA_DIR": "Local data directory, also holds task_tracker.log (default: .local/task_tracker).",
    "TASK_TRACKER_TASKS_DB_PATH": "SQLite file for the sqlite backend (default: <data_dir>/tasks.sqlite3).",
    "TASK_TRACKER_TASKS_JSON_DIR": "Directory for the json backend, one <key>.json file (default: <data_dir>).",
}
