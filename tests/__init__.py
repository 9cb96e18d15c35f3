"""Test package. Required settings are defaulted before any carrental import."""

import os

os.environ.setdefault("JWT_SIGNATURE_KEY", "test-signature-key")
os.environ.setdefault("JWT_EXPIRE_MINUTES", "60")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
