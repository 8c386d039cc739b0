import os
import tomllib
from urllib.parse import quote

DEFAULT_CONFIG_PATH = 'pyx-metrics-viewer.toml'
DEFAULT_DB_HOST = 'localhost'
REQUIRED_DB_FIELDS = ('username', 'password', 'db_name')
LOG_LEVELS = {
    'debug': 'DEBUG',
    'info': 'INFO',
    'warn': 'WARNING',
    'warning': 'WARNING',
    'error': 'ERROR',
}


class ConfigError(Exception):
    """Raised when the viewer configuration is missing or invalid."""


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'postgresql://pyx@localhost/pyx'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = 'INFO'
    RUN_DEBUG_SERVER = False


class ViewerConfig(Config):
    """Config built from a parsed TOML document.

    Only the ``[database]`` credentials are required; ``host`` falls back to
    localhost. ``DATABASE_URL`` in the environment still wins over the
    computed URI.
    """

    def __init__(self, data):
        database = data.get('database') or {}
        missing = [f'database.{name}' for name in REQUIRED_DB_FIELDS if not database.get(name)]
        if missing:
            raise ConfigError(f"Missing required config field(s): {', '.join(missing)}")

        self.DB_USERNAME = str(database['username'])
        self.DB_PASSWORD = str(database['password'])
        self.DB_NAME = str(database['db_name'])
        self.DB_HOST = str(database.get('host') or DEFAULT_DB_HOST)
        self.SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or self.database_uri()
        self.LOG_LEVEL = parse_log_level(data.get('log_level'))
        self.RUN_DEBUG_SERVER = bool(data.get('run_debug_server', False))

    def database_uri(self):
        return (
            f"postgresql://{quote(self.DB_USERNAME, safe='')}:{quote(self.DB_PASSWORD, safe='')}"
            f"@{self.DB_HOST}/{self.DB_NAME}"
        )


def parse_log_level(value):
    if not value:
        return Config.LOG_LEVEL
    level = LOG_LEVELS.get(str(value).strip().lower())
    if level is None:
        raise ConfigError(f"Unknown log level: {value}")
    return level


def load_config(path=None):
    """Read the TOML config file and return a Flask config object."""
    path = path or os.environ.get('PYX_METRICS_VIEWER_CONFIG') or DEFAULT_CONFIG_PATH
    try:
        with open(path, 'rb') as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    return ViewerConfig(data)
