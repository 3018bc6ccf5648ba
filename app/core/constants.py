"""Core constants: storage keys, field limits, and id prefixes."""

# Storage keys (one serialized value per key)
DEFAULT_TASK_COLLECTION_KEY = "task-collection"
DEFAULT_SESSION_KEY = "current-session"

STORAGE_BACKENDS = ("file", "memory", "redis")

# Task field limits, measured after trimming
TASK_TITLE_MAX_LENGTH = 100
TASK_DESCRIPTION_MAX_LENGTH = 500

# Id prefixes
TASK_ID_PREFIX = "task"
USER_ID_PREFIX = "user"
