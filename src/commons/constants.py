class Constants:
    # config.yaml sections
    STORE = "store"
    ATTACHMENT = "attachment"
    SUBMISSION = "submission"
    SESSION = "session"
    LOGGING = "logging"
    # config.yaml keys
    BASE_URL = "base_url"
    BASE_URL_ENV = "base_url_env"
    TIMEOUT = "timeout"
    ALLOWED_EXTENSIONS = "allowed_extensions"
    DEFAULT_PCT = "default_pct"
    USER_KEY = "user_key"
    JWT_KEY = "jwt_key"
    STORAGE_FILE = "storage_file"
    LEVEL = "level"
    LOG_FILE = "log_file"
