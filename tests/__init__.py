import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-inventory-suite")
os.environ.setdefault("PASSWORD_PBKDF2_ROUNDS", "1000")
os.environ.setdefault("LOG_LEVEL", "WARNING")
