"""Default Flask settings, overridable through ``FINCALC_*`` environment variables."""


class DefaultConfig:
    # frontend dev servers allowed to call the API
    CORS_ORIGINS = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL = "INFO"
    JSON_SORT_KEYS = False
