"""
数据库引擎：AsyncEngine 创建 + AsyncSession 工厂
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.config import Settings, get_settings

settings = get_settings()


def _engine_options(cfg: Settings) -> dict:
    """SQLite（测试用）不支持连接池参数和 search_path，单独处理"""
    if cfg.is_sqlite:
        return {"echo": cfg.DB_ECHO, "poolclass": NullPool}

    options = {
        "pool_size": cfg.DB_POOL_SIZE,
        "max_overflow": cfg.DB_MAX_OVERFLOW,
        "pool_timeout": cfg.DB_POOL_TIMEOUT,
        "pool_recycle": cfg.DB_POOL_RECYCLE,
        "echo": cfg.DB_ECHO,
    }
    if cfg.DB_SCHEMA:
        options["connect_args"] = {"server_settings": {"search_path": cfg.DB_SCHEMA}}
    return options


engine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings))

if settings.is_sqlite:

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        """SQLite 默认不校验外键，每个连接显式打开"""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncSession:
    """FastAPI 依赖注入：获取数据库会话"""
    async with async_session() as session:
        yield session
