"""Shared constants for cart identity and storage."""
from __future__ import annotations

# Reserved separator between the catalog id and the unique suffix of a line id.
CART_LINE_ID_SEPARATOR = ":::CART:::"

# Placeholder used in identity keys when nothing is selected.
NO_SELECTION = "none"

DEFAULT_CART_STORAGE_KEY = "amber_cartItems"
DEFAULT_CART_FILE_PATH = "data/cart.json"

CART_BACKEND_MEMORY = "memory"
CART_BACKEND_FILE = "file"
CART_BACKEND_REDIS = "redis"
CART_BACKENDS = {CART_BACKEND_MEMORY, CART_BACKEND_FILE, CART_BACKEND_REDIS}

MIN_PASSWORD_LENGTH = 6
TOP_MEMBERS_LIMIT = 10
