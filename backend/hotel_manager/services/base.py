"""
服务基类 - 单表的增删改查

写操作统一经过 committing()，约束冲突以 UniqueViolation / ForeignKeyViolation /
NotNullViolation 抛出；找不到记录时抛 ValueError。
"""
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from hotel_manager.errors import committing

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class CrudService(Generic[ModelT]):
    """单个模型的通用 CRUD"""

    model: Type[ModelT]
    label: str = "记录"

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: Any) -> Optional[ModelT]:
        """按主键获取，不存在返回 None"""
        return self.db.get(self.model, key)

    def get_or_raise(self, key: Any) -> ModelT:
        obj = self.get(key)
        if obj is None:
            raise ValueError(f"{self.label}不存在: {key}")
        return obj

    def get_all(self, limit: int = 100, offset: int = 0) -> List[ModelT]:
        return self.db.query(self.model).offset(offset).limit(limit).all()

    def _insert(self, obj: ModelT) -> ModelT:
        with committing(self.db):
            self.db.add(obj)
        self.db.refresh(obj)
        logger.info("新建%s: %s", self.label, inspect(obj).identity)
        return obj

    def create(self, data: BaseModel) -> ModelT:
        return self._insert(self.model(**data.model_dump(exclude_unset=True)))

    def update(self, key: Any, data: BaseModel) -> ModelT:
        """只更新请求中显式给出的字段"""
        obj = self.get_or_raise(key)
        with committing(self.db):
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(obj, field, value)
        self.db.refresh(obj)
        return obj

    def delete(self, key: Any) -> None:
        """物理删除，子表按外键策略级联或置空"""
        obj = self.get_or_raise(key)
        with committing(self.db):
            self.db.delete(obj)
        logger.info("删除%s: %s", self.label, key)
