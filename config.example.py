# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "FISHRON_APP_NAME": "Assistant display name (default: Fishron).",
    "FISHRON_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "FISHRON_DATA_DIR": "Local data directory (default: data).",
    "FISHRON_TASKS_PATH": "Task file path (default: <data_dir>/fishron.txt).",
    "FISHRON_LOG_FILE": "Log file path (default: <data_dir>/fishron.log).",
    # Behaviour
    "FISHRON_AUTOSAVE": "Save after every change (true/false, default: true). Always saved on exit.",
    # GUI
    "FISHRON_GUI_WIDTH": "Chat window width in pixels (default: 400).",
    "FISHRON_GUI_HEIGHT": "Chat window height in pixels (default: 600).",
}
