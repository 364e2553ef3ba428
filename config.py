import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    PERSISTENCE_BACKEND = data.get("PERSISTENCE_BACKEND", "sql")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Auth field lookup
    EMAIL_FIELD_NAME = data.get("EMAIL_FIELD_NAME", "email")
    EMAIL_REGEX = data.get(
        "EMAIL_REGEX", r"\A[^@\s]+@([^@\s]+\.)+[^@\s]+\Z"
    )
    DOWNCASE_AUTH_FIELD = bool(data.get("DOWNCASE_AUTH_FIELD", False))

    # Token lifetimes (seconds, 0 disables expiration)
    RESET_PASSWORD_EXPIRATION_TIME = int(
        data.get("RESET_PASSWORD_EXPIRATION_TIME", 24 * 60 * 60)
    )
    CONFIRMATION_EXPIRATION_TIME = int(
        data.get("CONFIRMATION_EXPIRATION_TIME", 24 * 60 * 60)
    )

    # Mail
    DELIVER_LATER = bool(data.get("DELIVER_LATER", False))
    AVOID_EMAIL_ERRORS = bool(data.get("AVOID_EMAIL_ERRORS", True))
    MAILER_SENDER = data.get("MAILER_SENDER", "no-reply@example.com")
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    CONFIRM_EMAIL_URL = data.get(
        "CONFIRM_EMAIL_URL", "http://localhost:3000/confirm-email"
    )
    RESET_PASSWORD_URL = data.get(
        "RESET_PASSWORD_URL", "http://localhost:3000/reset-password"
    )
    UNLOCK_ACCOUNT_URL = data.get(
        "UNLOCK_ACCOUNT_URL", "http://localhost:3000/unlock-account"
    )

    # Sessions
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRATION_TIME = int(data.get("JWT_EXPIRATION_TIME", 7 * 24 * 60 * 60))
    SIMULTANEOUS_SESSIONS = int(data.get("SIMULTANEOUS_SESSIONS", 2))
    MIN_PASSWORD_LENGTH = int(data.get("MIN_PASSWORD_LENGTH", 8))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Lockable
    LOCK_STRATEGIES = data.get("LOCK_STRATEGIES", ["failed_attempts"])
    UNLOCK_STRATEGIES = data.get("UNLOCK_STRATEGIES", ["time", "email"])
    MAXIMUM_ATTEMPTS = int(data.get("MAXIMUM_ATTEMPTS", 3))
    UNLOCK_IN = int(data.get("UNLOCK_IN", 60 * 60))
    RESET_ATTEMPTS_IN = int(data.get("RESET_ATTEMPTS_IN", 60 * 60))
