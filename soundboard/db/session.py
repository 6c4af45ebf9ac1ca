from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.engine import make_url

from soundboard.core.config import Settings, settings


def engine_options(url: str, config: Settings = settings) -> dict:
    """Engine keyword arguments; pool limits and timeouts only apply to server databases."""
    options = {"echo": config.DB_ECHO, "future": True, "pool_pre_ping": True}
    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_size=config.DB_POOL_SIZE,
            pool_timeout=config.DB_POOL_TIMEOUT,
            # asyncpg: "timeout" bounds connecting, "command_timeout" every statement.
            connect_args={"timeout": config.DB_TIMEOUT, "command_timeout": config.DB_TIMEOUT},
        )
    return options


def build_engine(url: str = settings.SQLALCHEMY_DATABASE_URI, **kwargs):
    options = engine_options(url)
    options.update(kwargs)
    return create_async_engine(url, **options)


engine = build_engine()

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
