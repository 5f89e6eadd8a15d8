import os

DEFAULTS = {
    'DATABASE_URL': 'sqlite:///crud.db',
    'PORT': 7000,
    'LOG_LEVEL': 'INFO',
    'DB_CONNECT_RETRIES': 10,
}


def load_config(overrides=None):
    """Read settings from the environment, then apply ``overrides``."""
    config = {
        'DATABASE_URL': os.getenv('DATABASE_URL', DEFAULTS['DATABASE_URL']),
        'PORT': int(os.environ.get('PORT', DEFAULTS['PORT'])),
        'LOG_LEVEL': os.environ.get('LOG_LEVEL', DEFAULTS['LOG_LEVEL']).upper(),
        'DB_CONNECT_RETRIES': int(os.environ.get('DB_CONNECT_RETRIES', DEFAULTS['DB_CONNECT_RETRIES'])),
    }
    if overrides:
        config.update(overrides)

    config['SQLALCHEMY_DATABASE_URI'] = config['DATABASE_URL']
    config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    return config
