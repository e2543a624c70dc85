# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "TODO_STORE_BACKEND": "Task store backend: sqlite | memory (default: sqlite).",
    "TODO_DATA_DIR": "Local data directory for the database and todo.log (default: .local/todo).",
    "TODO_DB_PATH": "SQLite database path (default: <data_dir>/todos.sqlite3).",
    # Console
    "TODO_INITIAL_ROUTE": "Route shown at start-up: '', '#/', '#/active', '#/completed' (default: '').",
    "TODO_CONSOLE_COLOR": "Use ANSI styling in the console view (true/false, default: true).",
}
