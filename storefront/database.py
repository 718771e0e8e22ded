"""Database configuration and initialization."""
from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Create SQLAlchemy base
Base = declarative_base()

# Global session and engine
engine = None
db_session = None


def _config_value(config, key, default=None):
    if isinstance(config, dict):
        return config.get(key, default)
    return getattr(config, key, default)


def init_db(config):
    """Initialize database connection."""
    global engine, db_session

    database_uri = _config_value(config, 'SQLALCHEMY_DATABASE_URI')
    echo = _config_value(config, 'SQLALCHEMY_ECHO', False)

    if database_uri.startswith('sqlite'):
        # A single shared connection keeps an in-memory database alive across sessions
        engine = create_engine(
            database_uri,
            echo=echo,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool
        )
    else:
        engine = create_engine(
            database_uri,
            echo=echo,
            pool_pre_ping=True,  # Enable connection health checks
            pool_size=10,
            max_overflow=20
        )

    db_session = scoped_session(
        sessionmaker(autocommit=False, autoflush=False, bind=engine)
    )

    # Register table metadata before creating it
    import storefront.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    return db_session


def get_session():
    """Get database session."""
    return db_session


def reset_db():
    """Drop and recreate every table, leaving an empty store."""
    if engine is None:
        raise RuntimeError('Database not initialized. Call init_db() first.')
    db_session.rollback()
    db_session.remove()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def close_db():
    """Close database session and release the engine."""
    global engine, db_session
    if db_session is not None:
        db_session.remove()
    if engine is not None:
        engine.dispose()
    engine = None
    db_session = None
