# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "STUDYZEN_APP_NAME": "App display name (default: StudyZen).",
    "STUDYZEN_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Console
    "STUDYZEN_CONSOLE_COLOR": "Allow ANSI colours in the console (true/false, default: true).",
    # Paths (gitignored)
    "STUDYZEN_DATA_DIR": "Local data + log directory (default: .local/studyzen).",
    "STUDYZEN_STATE_PATH": "Session JSON file (default: <data_dir>/studyzen_data.json).",
}
