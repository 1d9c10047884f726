"""Runtime configuration defaults for the online store."""

from __future__ import annotations

# Bounded collection sizes.
MAX_PRODUCTS = 10
MAX_CART_ITEMS = 20
MAX_ORDERS = 50

# Plain-text audit trail, one line per successful checkout.
AUDIT_LOG_PATH = "log.txt"

# Directory for the structured application log (see logging_config).
LOG_DIR = "logs"
LOG_FILE_NAME = "online_store.log"
