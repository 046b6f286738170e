"""Configuration module for the application"""
import os


class Config:
    """Base configuration class"""
    # Application
    APP_NAME = 'SolrMessage'

    # Flask configuration
    MAX_CONTENT_LENGTH = 4 * 1024 * 1024  # 4MB max update payload

    # Message settings
    PRETTY_PRINT = os.environ.get('PRETTY_PRINT', '').lower() in ('1', 'true', 'yes')
    MESSAGE_MIMETYPE = 'application/xml'

    # Logging configuration
    LOG_FILE = os.environ.get('LOG_FILE', 'logs/solr_message.log')
    LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    LOG_MAX_BYTES = 10240
    LOG_BACKUP_COUNT = 10

    @staticmethod
    def init_app(app):
        """Initialize application configuration"""
        import logging
        app.logger.setLevel(app.config['LOG_LEVEL'])
        logging.getLogger('solr_message').setLevel(app.config['LOG_LEVEL'])


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    PRETTY_PRINT = True

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Development-specific initialization
        import logging
        logging.basicConfig(level=logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = False
    TESTING = True
    PRETTY_PRINT = False
    MAX_CONTENT_LENGTH = 64 * 1024

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Production-specific logging
        import logging
        from logging.handlers import RotatingFileHandler

        log_dir = os.path.dirname(app.config['LOG_FILE'])
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            app.config['LOG_FILE'],
            maxBytes=cls.LOG_MAX_BYTES,
            backupCount=cls.LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(logging.Formatter(cls.LOG_FORMAT))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.info('SolrMessage startup')

        # Handle proxy server headers
        from werkzeug.middleware.proxy_fix import ProxyFix
        app.wsgi_app = ProxyFix(app.wsgi_app)


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
