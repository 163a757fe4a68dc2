"""Constants and configuration for the postdeck editor."""

class HistoryConstants:
    """Central configuration constants for undo/redo history."""

    # History sizing
    DEFAULT_MAX_SIZE = 50  # Snapshots kept per document
    MIN_MAX_SIZE = 1
    MAX_MAX_SIZE = 10000  # Upper bound accepted from the settings file

    # Settings persistence
    APP_NAME = "postdeck"
    SETTINGS_FILENAME = "settings.json"
    MAX_HISTORY_SETTING = "max_history_size"

    # Status messages
    UNDONE_MESSAGE = "Undone"
    REDONE_MESSAGE = "Redone"
    NOTHING_TO_UNDO_MESSAGE = "Nothing to undo"
    NOTHING_TO_REDO_MESSAGE = "Nothing to redo"
    NO_DECK_MESSAGE = "No deck"
    PREVIOUS_POST_MESSAGE = "← Previous post ({}/{})"
    NEXT_POST_MESSAGE = "Next post → ({}/{})"
