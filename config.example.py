# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/tasklist.log (default: true).",
    # Paths
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
    "TASKLIST_TASKS_PATH": "Task list JSON file (default: tasks.json in the working directory).",
}
