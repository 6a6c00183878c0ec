# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKS_APP_NAME": "Name shown in the console banner (default: tasks).",
    "TASKS_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKS_DATA_DIR": "Local data directory, also holds task_tracker.log (default: .local/tasks).",
    "TASKS_FILE": "Default path for save/load without an argument (default: <data_dir>/tasks.json).",
    # Startup
    "TASKS_AUTOLOAD": "Load TASKS_FILE on startup if it exists (true/false, default: false).",
}
