"""
错误类型

数据库在写入时报告的约束冲突统一翻译为三种可区分的错误：
唯一约束、外键约束、非空约束。表结构本身的问题在加载期报 SchemaError。
"""
import logging
import re
from contextlib import contextmanager
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class SchemaError(Exception):
    """表结构声明有误（加载期，任何数据操作之前）"""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("表结构校验失败: " + "; ".join(self.problems))


class IntegrityViolation(Exception):
    """数据库约束冲突的基类"""

    kind = "integrity"

    def __init__(self, message: str, table: Optional[str] = None,
                 columns: Tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.table = table
        self.columns = tuple(columns)


class UniqueViolation(IntegrityViolation):
    kind = "unique"


class ForeignKeyViolation(IntegrityViolation):
    kind = "foreign_key"


class NotNullViolation(IntegrityViolation):
    kind = "not_null"


# PostgreSQL SQLSTATE
_SQLSTATE_KINDS = {
    "23505": UniqueViolation,
    "23503": ForeignKeyViolation,
    "23502": NotNullViolation,
}

# SQLite 错误信息前缀
_SQLITE_KINDS = (
    ("UNIQUE constraint failed", UniqueViolation),
    ("FOREIGN KEY constraint failed", ForeignKeyViolation),
    ("NOT NULL constraint failed", NotNullViolation),
)

_SQLITE_COLUMNS = re.compile(r"constraint failed:\s*(.+)$")


def _sqlstate(orig) -> Optional[str]:
    # psycopg2 用 pgcode，psycopg 3 用 sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _sqlite_location(message: str) -> Tuple[Optional[str], Tuple[str, ...]]:
    """从 'UNIQUE constraint failed: users.email' 中取出表名和列名"""
    match = _SQLITE_COLUMNS.search(message)
    if not match:
        return None, ()
    table = None
    columns = []
    for item in match.group(1).split(","):
        item = item.strip()
        if "." in item:
            table, column = item.split(".", 1)
            columns.append(column)
        elif item:
            columns.append(item)
    return table, tuple(columns)


def translate_integrity_error(exc: IntegrityError) -> IntegrityViolation:
    """把 IntegrityError 翻译成具体的约束冲突类型"""
    orig = exc.orig
    message = str(orig) if orig is not None else str(exc)

    state = _sqlstate(orig)
    if state in _SQLSTATE_KINDS:
        diag = getattr(orig, "diag", None)
        table = getattr(diag, "table_name", None)
        column = getattr(diag, "column_name", None)
        return _SQLSTATE_KINDS[state](message, table, (column,) if column else ())

    for prefix, kind in _SQLITE_KINDS:
        if prefix in message:
            table, columns = _sqlite_location(message)
            return kind(message, table, columns)

    return IntegrityViolation(message)


@contextmanager
def committing(db: Session):
    """在块结束时提交；约束冲突时回滚并抛出翻译后的错误

    用法:
        with committing(db):
            db.add(obj)
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        violation = translate_integrity_error(exc)
        logger.warning("写入被数据库拒绝 (%s): %s", violation.kind, violation.message)
        raise violation from exc
