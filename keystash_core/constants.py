# keystash_core/constants.py

# Storage keys
KEYS_KEY = "keys"
CURRENT_PUBKEY_KEY = "current_pubkey"
CURRENT_OPTIONS_PUBKEY_KEY = "current_options_pubkey"

# Grant conditions
CONDITION_EXPIRABLE = "expirable"
CONDITION_PERMANENT = "permanent"

# Expirable grants older than this are dropped on the next read
EXPIRY_WINDOW_SECONDS = 5 * 60

NO_CAPABILITIES = "nothing"
NO_PERMISSIONS = "none"

DEFAULT_DB_PATH = "db/keystash.db"
