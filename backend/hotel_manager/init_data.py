"""
初始化数据脚本
创建：管理员账号、示例酒店及其房间

默认账号：
  admin@hotel.local / 123456   角色 admin

用法:
  python -m hotel_manager.init_data
"""
import logging

from hotel_manager.database import SessionLocal, init_db
from hotel_manager.models.schema import Hotel, Room, User
from hotel_manager.security.auth import get_password_hash

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@hotel.local"
ADMIN_PASSWORD = "123456"

SAMPLE_HOTEL = {"name": "Grand", "address": "Av. Paulista, 1000", "phone": "+55 11 4000-0000"}

# (房间号, 楼层, 床位, 日价)
SAMPLE_ROOMS = [
    (101, 1, 2, 150.0),
    (102, 1, 2, 150.0),
    (103, 1, 1, 120.0),
    (201, 2, 3, 210.0),
    (202, 2, 2, 180.0),
]


def init_admin(db) -> bool:
    """创建管理员账号，已存在时跳过"""
    if db.query(User).filter(User.email == ADMIN_EMAIL).first():
        return False
    db.add(User(email=ADMIN_EMAIL, password=get_password_hash(ADMIN_PASSWORD), role=["admin"]))
    db.flush()
    return True


def init_sample_hotel(db) -> int:
    """创建示例酒店与房间，返回新建房间数"""
    hotel = db.query(Hotel).filter(Hotel.name == SAMPLE_HOTEL["name"]).first()
    if not hotel:
        hotel = Hotel(**SAMPLE_HOTEL)
        db.add(hotel)
        db.flush()

    created = 0
    for number, floor, beds, rate in SAMPLE_ROOMS:
        if db.get(Room, number):
            continue
        db.add(Room(number=number, hotel_id=hotel.id, floor=floor, beds=beds, daily_rate=rate))
        created += 1
    return created


def init_data(db) -> dict:
    stats = {
        "admin": init_admin(db),
        "rooms": init_sample_hotel(db),
    }
    db.commit()
    return stats


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        stats = init_data(db)
        logger.info("初始化完成: %s", stats)
    finally:
        db.close()


if __name__ == '__main__':
    main()
