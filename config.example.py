# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ROI_APP_NAME": "App display name (default: roi-board).",
    "ROI_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "ROI_DATA_DIR": "Local data dir holding roi-board.log (default: .local/roi).",
    # Display
    "ROI_CURRENCY_SYMBOL": "Prefix for revenue values (default: $).",
    "ROI_NOTES_PREVIEW_CHARS": "Max characters of notes shown under a title in /list (default: 48, 0 = no limit).",
    # Startup
    "ROI_SEED_DEMO": "Add three sample tasks at startup (true/false, default: false).",
}
