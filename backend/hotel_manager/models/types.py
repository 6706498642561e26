"""
自定义列类型
"""
from sqlalchemy import String, JSON
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import ColumnElement
from sqlalchemy.types import TypeDecorator


class StringArray(TypeDecorator):
    """字符串数组列

    PostgreSQL 上是原生 VARCHAR(n)[]，其他方言退化为 JSON 列表。
    读写两侧都保证是 list，None 按空列表存储。
    """

    impl = JSON
    cache_ok = True

    def __init__(self, length: int = None, *args, **kwargs):
        self.length = length
        super().__init__(*args, **kwargs)

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(ARRAY(String(self.length)))
        return dialect.type_descriptor(JSON())

    def process_bind_param(self, value, dialect):
        if value is None:
            return []
        # 字符串本身可迭代，不拦下会被拆成单个字符
        if isinstance(value, (str, bytes)):
            raise TypeError(f"StringArray 需要字符串列表，收到 {type(value).__name__}: {value!r}")
        return [str(item) for item in value]

    def process_result_value(self, value, dialect):
        if value is None:
            return []
        return list(value)


class empty_array(ColumnElement):
    """空数组的数据库默认值，用作 server_default

    PostgreSQL 渲染为 '{}'，其他方言渲染为 JSON 的 '[]'。
    """

    inherit_cache = True


@compiles(empty_array)
def _compile_empty_array(element, compiler, **kw):
    return "'[]'"


@compiles(empty_array, "postgresql")
def _compile_empty_array_postgresql(element, compiler, **kw):
    return "'{}'"
