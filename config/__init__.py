import os

# APP_ENV aliases -> settings module. Anything unknown runs with development settings.
_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",  # cron / scheduled job
    "test": "config.testing",
    "testing": "config.testing",  # zero delay window
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")
