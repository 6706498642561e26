"""
用户服务 - 登录账号
"""
import logging
from typing import Optional

from hotel_manager.errors import committing
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import UserCreate, UserUpdate
from hotel_manager.security.auth import get_password_hash, verify_password, create_access_token
from hotel_manager.services.base import CrudService

logger = logging.getLogger(__name__)


class UserService(CrudService[User]):
    """用户服务"""

    model = User
    label = "用户"

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, data: UserCreate) -> User:
        """创建用户，邮箱重复时由数据库报 UniqueViolation"""
        user = User(
            email=data.email,
            password=get_password_hash(data.password),
            role=list(data.role),
        )
        return self._insert(user)

    def update(self, user_id: int, data: UserUpdate) -> User:
        user = self.get_or_raise(user_id)
        with committing(self.db):
            if data.password is not None:
                user.password = get_password_hash(data.password)
            if data.role is not None:
                user.role = list(data.role)
        self.db.refresh(user)
        return user

    def authenticate(self, email: str, password: str) -> Optional[dict]:
        """校验邮箱密码，成功返回 token 与用户"""
        user = self.get_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.info("登录失败: %s", email)
            return None
        return {
            "access_token": create_access_token(user.id, user.role),
            "token_type": "bearer",
            "user": user,
        }
