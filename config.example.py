# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for anything machine-specific.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKCAL_APP_NAME": "App display name (default: task-calendar).",
    "TASKCAL_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Remote task store
    "TASKCAL_API_URL": "Task resource URL (default: https://todo-backend-5t1x.onrender.com/api/task).",
    "TASKCAL_USER_ID": "User id used in every request (default: 2313841).",
    "TASKCAL_SHARED_DEFAULTS_KEY": "Reserved key holding the shared default tasks (default: shared_default_tasks).",
    "TASKCAL_HTTP_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
    "TASKCAL_HTTP_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 20).",
    # Paths (gitignored)
    "TASKCAL_DATA_DIR": "Local data directory for logs and the session flag (default: .local/task-calendar).",
    "TASKCAL_SESSION_PATH": "Logged-in flag file (default: <data_dir>/session.json).",
}
