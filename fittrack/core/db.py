from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from fittrack.core.config import settings


def async_database_url(url: str) -> str:
    """postgresql:// и sqlite:// из .env -> асинхронные драйверы."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


DATABASE_URL = async_database_url(settings.DATABASE_URL)

# Однопользовательский трекер можно запускать и на локальном файле SQLite
engine = create_async_engine(
    DATABASE_URL,
    echo=settings.SQL_ECHO,
    pool_pre_ping=not DATABASE_URL.startswith("sqlite"),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
