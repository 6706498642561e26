"""
加载期表结构校验
"""
from typing import List

from sqlalchemy import MetaData, UniqueConstraint
from sqlalchemy.exc import NoReferenceError

from hotel_manager.errors import SchemaError

# 允许的删除策略
DELETE_POLICIES = ("CASCADE", "SET NULL")


def _is_unique_target(column) -> bool:
    table = column.table
    if column.primary_key and len(table.primary_key.columns) == 1:
        return True
    if column.unique:
        return True
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint) and list(constraint.columns.keys()) == [column.key]:
            return True
    return False


def validate_schema(metadata: MetaData) -> None:
    """检查所有表声明，有问题时一次性抛出 SchemaError

    检查项：
    - 每张表必须有主键
    - 外键目标必须可解析，且为主键或唯一列
    - 外键必须显式声明 CASCADE 或 SET NULL 删除策略
    - SET NULL 的外键列必须可空
    """
    problems: List[str] = []

    for table in metadata.tables.values():
        if not table.primary_key.columns:
            problems.append(f"{table.name}: 缺少主键")

        for fk in sorted(table.foreign_keys, key=lambda f: f.parent.name):
            where = f"{table.name}.{fk.parent.name}"
            try:
                target = fk.column
            except NoReferenceError:
                problems.append(f"{where}: 外键目标无法解析 ({fk.target_fullname})")
                continue

            policy = (fk.ondelete or "").upper()
            if policy not in DELETE_POLICIES:
                problems.append(f"{where}: 删除策略必须是 CASCADE 或 SET NULL，当前为 {fk.ondelete!r}")
            elif policy == "SET NULL" and not fk.parent.nullable:
                problems.append(f"{where}: SET NULL 外键列不能为 NOT NULL")

            if not _is_unique_target(target):
                problems.append(f"{where}: 外键目标 {target.table.name}.{target.name} 既非主键也非唯一列")

    if problems:
        raise SchemaError(problems)
