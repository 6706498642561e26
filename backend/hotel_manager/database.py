"""
数据库配置 - 持久化层
引擎、会话工厂、声明式基类，以及统一的表名映射函数
"""
import logging
from typing import Callable

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from hotel_manager.config import settings

logger = logging.getLogger(__name__)


def make_table_namer(prefix: str = "") -> Callable[[str], str]:
    """构造表名映射函数

    所有表声明都经过同一个映射函数，多个项目共用一个数据库时
    只需改变前缀，列定义不变。空前缀即恒等映射。
    """
    def table_namer(name: str) -> str:
        return f"{prefix}{name}"
    return table_namer


create_table = make_table_namer(settings.TABLE_PREFIX)


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite 默认不检查外键，每个新连接上打开 foreign_keys"""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    connect_args={"check_same_thread": False} if _is_sqlite(settings.DATABASE_URL) else {},
)
enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """依赖注入：获取数据库会话"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None):
    """初始化数据库表

    先做加载期校验，校验失败时不会建任何表。
    """
    from hotel_manager.models import schema  # noqa
    from hotel_manager.models.validation import validate_schema

    bind = bind or engine
    validate_schema(Base.metadata)
    Base.metadata.create_all(bind=bind)
    logger.info("数据库表已就绪: %d 张", len(Base.metadata.tables))

    # 文件型 SQLite 启用 WAL 模式以提高并发性能
    if bind.dialect.name == "sqlite" and bind.url.database not in (None, "", ":memory:"):
        with bind.connect() as conn:
            conn.execute(text("PRAGMA journal_mode=WAL"))
            conn.execute(text("PRAGMA synchronous=NORMAL"))
            conn.commit()
