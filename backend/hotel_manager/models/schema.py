"""
表结构定义 (Schema Definition)

酒店管理系统的全部实体：酒店、房间、用户、员工、任务、客户、预订、
客户-预订关联、客房服务、支出，以及一张演示用的 post 表。

删除策略完全交给数据库外键：
- 级联 (CASCADE)：删除父行时一并删除子行
- 置空 (SET NULL)：删除父行时子行保留，外键置空，用于保留历史记录

父侧 relationship 一律 passive_deletes=True，不让 ORM 抢在数据库前面处理子行。
"""
from datetime import datetime, UTC

from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Double,
    ForeignKey, Index, PrimaryKeyConstraint, func, text
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from hotel_manager.database import Base, create_table
from hotel_manager.models.types import StringArray, empty_array


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Post(Base):
    """演示表，与酒店业务无关"""
    __tablename__ = create_table("post")

    id = Column(Integer, primary_key=True)
    name = Column(String(256))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # 由 ORM 写路径维护，不是数据库触发器
    updated_at = Column(DateTime(timezone=True), onupdate=_utcnow)

    __table_args__ = (
        Index(create_table("name_idx"), "name"),
    )


class Hotel(Base):
    """
    酒店
    deleted 为软删除标记，查询时是否排除由访问层决定
    """
    __tablename__ = create_table("hotels")

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    address = Column(String(200))
    phone = Column(String(50))
    deleted = Column(Boolean, nullable=False, default=False, server_default=expression.false())

    rooms = relationship("Room", back_populates="hotel",
                         cascade="all, delete-orphan", passive_deletes=True)
    employees = relationship("Employee", back_populates="hotel",
                             cascade="all, delete-orphan", passive_deletes=True)
    expenses = relationship("Expense", back_populates="hotel",
                            cascade="all, delete-orphan", passive_deletes=True)


class User(Base):
    """登录账号，role 为角色列表"""
    __tablename__ = create_table("users")

    id = Column(Integer, primary_key=True)
    email = Column(String(100), nullable=False, unique=True)
    password = Column(String(256), nullable=False)  # bcrypt 哈希
    role = Column(StringArray(50), nullable=False, default=list, server_default=empty_array())

    employee = relationship("Employee", back_populates="user", uselist=False,
                            cascade="all, delete-orphan", passive_deletes=True)


class Room(Base):
    """房间，房间号为手工指定的主键"""
    __tablename__ = create_table("rooms")

    number = Column(Integer, primary_key=True, autoincrement=False)
    hotel_id = Column(Integer, ForeignKey(Hotel.id, ondelete="CASCADE"), nullable=False)
    floor = Column(Integer, nullable=False)
    available = Column(Boolean, nullable=False, default=True, server_default=expression.true())
    beds = Column(Integer, nullable=False)
    description = Column(String(100), nullable=False, default="", server_default="")
    daily_rate = Column(Double, nullable=False)

    hotel = relationship("Hotel", back_populates="rooms")
    # 房间删除后预订保留，room_number 置空
    reservations = relationship("Reservation", back_populates="room", passive_deletes=True)


class Employee(Base):
    """员工：与用户账号一对一，隶属一家酒店"""
    __tablename__ = create_table("employees")

    cpf = Column(String(15), primary_key=True)
    user_id = Column(Integer, ForeignKey(User.id, ondelete="CASCADE"), nullable=False, unique=True)
    hotel_id = Column(Integer, ForeignKey(Hotel.id, ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(String(100))

    user = relationship("User", back_populates="employee")
    hotel = relationship("Hotel", back_populates="employees")
    tasks = relationship("Task", back_populates="employee", passive_deletes=True)


class Task(Base):
    """任务，员工被删除后作为历史记录保留"""
    __tablename__ = create_table("tasks")

    id = Column(Integer, primary_key=True)
    # 引用员工的 user_id 而不是 cpf
    employee_id = Column(Integer, ForeignKey(Employee.user_id, ondelete="SET NULL"))
    description = Column(String(100), nullable=False)
    start = Column(DateTime)
    end = Column(DateTime)

    employee = relationship("Employee", back_populates="tasks")
    room_service = relationship("RoomService", back_populates="task", uselist=False,
                                cascade="all, delete-orphan", passive_deletes=True)


class Customer(Base):
    """客户"""
    __tablename__ = create_table("customers")

    cpf = Column(String(15), primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100))
    phone = Column(String(50))
    address = Column(String(100))

    # 关联行只通过 CustomerReservation 写入，两侧集合只读
    reservations = relationship("Reservation", secondary=lambda: CustomerReservation.__table__,
                                viewonly=True, order_by="Reservation.number")


class Reservation(Base):
    """预订，房间删除后保留"""
    __tablename__ = create_table("reservations")

    number = Column(Integer, primary_key=True)
    room_number = Column(Integer, ForeignKey(Room.number, ondelete="SET NULL"))
    check_in = Column(DateTime)
    check_out = Column(DateTime)
    total_price = Column(Double, nullable=False, default=0, server_default=text("0"))
    status_paid = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    vehicles = Column(StringArray(50), nullable=False, default=list, server_default=empty_array())

    room = relationship("Room", back_populates="reservations")
    customers = relationship("Customer", secondary=lambda: CustomerReservation.__table__,
                             viewonly=True, order_by="Customer.cpf")
    room_services = relationship("RoomService", back_populates="reservation",
                                 cascade="all, delete-orphan", passive_deletes=True)

    @property
    def customer_cpfs(self):
        return [customer.cpf for customer in self.customers]


class CustomerReservation(Base):
    """客户与预订的多对多关联表"""
    __tablename__ = create_table("customer_reservations")

    customer_cpf = Column(String(15), ForeignKey(Customer.cpf, ondelete="CASCADE"), nullable=False)
    reservation_number = Column(Integer, ForeignKey(Reservation.number, ondelete="CASCADE"),
                                nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("customer_cpf", "reservation_number"),
    )


class RoomService(Base):
    """客房服务：任务的一对一扩展，同时挂在某个预订上"""
    __tablename__ = create_table("room_services")

    task_id = Column(Integer, ForeignKey(Task.id, ondelete="CASCADE"),
                     primary_key=True, autoincrement=False)
    reservation_number = Column(Integer, ForeignKey(Reservation.number, ondelete="CASCADE"),
                                nullable=False)
    price = Column(Double, nullable=False)

    task = relationship("Task", back_populates="room_service")
    reservation = relationship("Reservation", back_populates="room_services")


class Expense(Base):
    """酒店支出"""
    __tablename__ = create_table("expenses")

    id = Column(Integer, primary_key=True)
    hotel_id = Column(Integer, ForeignKey(Hotel.id, ondelete="CASCADE"), nullable=False)
    description = Column(String(100), nullable=False)
    value = Column(Double, nullable=False)
    date = Column(DateTime, nullable=False, server_default=func.now())

    hotel = relationship("Hotel", back_populates="expenses")
