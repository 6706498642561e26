"""
Pytest 配置和共享 fixtures
"""
import os

# 应用级引擎在导入时创建，测试期间指向内存库
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from hotel_manager.database import Base, get_db, enable_sqlite_foreign_keys
from hotel_manager.models.schema import (
    Hotel, User, Room, Employee, Task, Customer, Reservation, CustomerReservation
)
from hotel_manager.security.auth import get_password_hash, create_access_token
from hotel_manager.main import app


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎，打开外键检查"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== 认证相关 Fixtures ==============

@pytest.fixture
def admin_user(db_session):
    """管理员账号"""
    user = User(email="admin@hotel.local", password=get_password_hash("123456"), role=["admin"])
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def staff_user(db_session):
    """普通前台账号"""
    user = User(email="front@hotel.local", password=get_password_hash("123456"), role=["receptionist"])
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(admin_user):
    """管理员认证请求头"""
    token = create_access_token(admin_user.id, admin_user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def staff_headers(staff_user):
    """前台认证请求头"""
    token = create_access_token(staff_user.id, staff_user.role)
    return {"Authorization": f"Bearer {token}"}


# ============== 实体相关 Fixtures ==============

@pytest.fixture
def sample_hotel(db_session):
    hotel = Hotel(id=1, name="Grand", address="Av. Paulista, 1000", phone="1140000000")
    db_session.add(hotel)
    db_session.commit()
    db_session.refresh(hotel)
    return hotel


@pytest.fixture
def sample_room(db_session, sample_hotel):
    room = Room(number=101, hotel_id=sample_hotel.id, floor=1, beds=2, daily_rate=150.0)
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room


@pytest.fixture
def sample_employee(db_session, sample_hotel):
    """员工及其登录账号"""
    user = User(email="maria@hotel.local", password=get_password_hash("123456"), role=["cleaner"])
    db_session.add(user)
    db_session.flush()
    employee = Employee(
        cpf="111.222.333-44", user_id=user.id, hotel_id=sample_hotel.id,
        name="Maria", phone="11999990000"
    )
    db_session.add(employee)
    db_session.commit()
    db_session.refresh(employee)
    return employee


@pytest.fixture
def sample_task(db_session, sample_employee):
    task = Task(employee_id=sample_employee.user_id, description="Limpar quarto 101")
    db_session.add(task)
    db_session.commit()
    db_session.refresh(task)
    return task


@pytest.fixture
def sample_customer(db_session):
    customer = Customer(cpf="123.456.789-00", name="Ana Souza", email="ana@example.com")
    db_session.add(customer)
    db_session.commit()
    db_session.refresh(customer)
    return customer


@pytest.fixture
def sample_reservation(db_session, sample_room, sample_customer):
    """房间 101 上的一笔预订，关联 sample_customer"""
    reservation = Reservation(room_number=sample_room.number, total_price=300.0, vehicles=["ABC-1234"])
    db_session.add(reservation)
    db_session.flush()
    db_session.add(CustomerReservation(
        customer_cpf=sample_customer.cpf, reservation_number=reservation.number
    ))
    db_session.commit()
    db_session.refresh(reservation)
    return reservation
