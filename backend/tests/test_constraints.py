"""
tests/test_constraints.py

数据库层面的约束：主键唯一、级联删除、置空删除、默认值。
所有写入都经过 committing()，错误以具体的冲突类型抛出。
"""
import pytest
from sqlalchemy import delete, text
from sqlalchemy.exc import StatementError

from hotel_manager.errors import (
    committing, UniqueViolation, ForeignKeyViolation, NotNullViolation
)
from hotel_manager.models.schema import (
    Post, Hotel, User, Room, Employee, Task, Customer,
    Reservation, CustomerReservation, RoomService, Expense
)


def _add(db, *objs):
    with committing(db):
        db.add_all(objs)
    return objs[0] if len(objs) == 1 else objs


def _count(db, model, *criteria):
    db.expire_all()
    return db.query(model).filter(*criteria).count()


class TestPrimaryKeys:

    def test_duplicate_hotel_id(self, db_session, sample_hotel):
        hotel_id = sample_hotel.id
        db_session.expunge_all()
        with pytest.raises(UniqueViolation):
            _add(db_session, Hotel(id=hotel_id, name="Outro"))

    def test_duplicate_room_number(self, db_session, sample_room):
        db_session.expunge_all()
        with pytest.raises(UniqueViolation) as exc_info:
            _add(db_session, Room(number=101, hotel_id=1, floor=2, beds=1, daily_rate=90.0))
        assert exc_info.value.table == "rooms"
        assert exc_info.value.columns == ("number",)

    def test_duplicate_customer_cpf(self, db_session, sample_customer):
        cpf = sample_customer.cpf
        db_session.expunge_all()
        with pytest.raises(UniqueViolation):
            _add(db_session, Customer(cpf=cpf, name="Outra"))

    def test_duplicate_customer_reservation_link(self, db_session, sample_reservation, sample_customer):
        link = dict(customer_cpf=sample_customer.cpf, reservation_number=sample_reservation.number)
        db_session.expunge_all()
        with pytest.raises(UniqueViolation):
            _add(db_session, CustomerReservation(**link))

    def test_one_room_service_per_task(self, db_session, sample_task, sample_reservation):
        task_id, number = sample_task.id, sample_reservation.number
        _add(db_session, RoomService(task_id=task_id, reservation_number=number, price=30.0))
        db_session.expunge_all()
        with pytest.raises(UniqueViolation):
            _add(db_session, RoomService(task_id=task_id, reservation_number=number, price=45.0))

    def test_duplicate_email(self, db_session, admin_user):
        with pytest.raises(UniqueViolation) as exc_info:
            _add(db_session, User(email=admin_user.email, password="x"))
        assert exc_info.value.columns == ("email",)

    def test_one_employee_per_user(self, db_session, sample_employee):
        with pytest.raises(UniqueViolation):
            _add(db_session, Employee(
                cpf="999.888.777-66", user_id=sample_employee.user_id,
                hotel_id=sample_employee.hotel_id, name="Outro", phone="0"
            ))

    def test_session_usable_after_violation(self, db_session, admin_user):
        """失败的写入已回滚，会话可以继续使用"""
        with pytest.raises(UniqueViolation):
            _add(db_session, User(email=admin_user.email, password="x"))
        _add(db_session, User(email="novo@hotel.local", password="x"))
        assert _count(db_session, User) == 2


class TestForeignKeys:

    def test_employee_with_missing_user(self, db_session, sample_hotel):
        with pytest.raises(ForeignKeyViolation):
            _add(db_session, Employee(
                cpf="000.000.000-00", user_id=9999, hotel_id=sample_hotel.id,
                name="Fantasma", phone="0"
            ))
        assert _count(db_session, Employee) == 0

    def test_room_with_missing_hotel(self, db_session):
        with pytest.raises(ForeignKeyViolation):
            _add(db_session, Room(number=1, hotel_id=42, floor=1, beds=1, daily_rate=10.0))

    def test_reservation_with_missing_room(self, db_session):
        with pytest.raises(ForeignKeyViolation):
            _add(db_session, Reservation(room_number=404))

    def test_task_references_employee_user_id(self, db_session, sample_employee):
        """任务引用的是员工的 user_id，不是 cpf"""
        task = _add(db_session, Task(employee_id=sample_employee.user_id, description="Revisar"))
        assert task.employee_id == sample_employee.user_id

    def test_room_service_with_missing_task(self, db_session, sample_reservation):
        with pytest.raises(ForeignKeyViolation):
            _add(db_session, RoomService(task_id=777, reservation_number=sample_reservation.number,
                                         price=10.0))


class TestNotNull:

    def test_room_requires_floor(self, db_session, sample_hotel):
        with pytest.raises(NotNullViolation) as exc_info:
            _add(db_session, Room(number=5, hotel_id=sample_hotel.id, beds=1, daily_rate=10.0))
        assert exc_info.value.columns == ("floor",)

    def test_hotel_requires_name(self, db_session):
        with pytest.raises(NotNullViolation):
            _add(db_session, Hotel(address="Sem nome"))

    def test_expense_requires_value(self, db_session, sample_hotel):
        with pytest.raises(NotNullViolation):
            _add(db_session, Expense(hotel_id=sample_hotel.id, description="Luz"))


class TestCascadeDelete:

    def test_hotel_scenario(self, db_session):
        """Hotel(1, Grand) + Room(101) -> 房间默认可用；删除酒店后房间也被删除"""
        hotel = _add(db_session, Hotel(id=1, name="Grand"))
        room = _add(db_session, Room(number=101, hotel_id=1, floor=1, beds=2, daily_rate=150.0))
        assert room.available is True

        with committing(db_session):
            db_session.delete(hotel)

        assert _count(db_session, Room, Room.number == 101) == 0

    def test_hotel_delete_cascades(self, db_session, sample_room, sample_employee):
        _add(db_session, Expense(hotel_id=1, description="Água", value=80.0))

        with committing(db_session):
            db_session.execute(delete(Hotel).where(Hotel.id == 1))

        assert _count(db_session, Room) == 0
        assert _count(db_session, Employee) == 0
        assert _count(db_session, Expense) == 0
        # 员工账号不属于酒店，保留
        assert _count(db_session, User) == 1

    def test_hotel_delete_keeps_history(self, db_session, sample_task, sample_reservation):
        """酒店删除后，任务和预订作为历史保留，外键置空"""
        with committing(db_session):
            db_session.delete(db_session.get(Hotel, 1))

        task = db_session.query(Task).one()
        reservation = db_session.query(Reservation).one()
        assert task.employee_id is None
        assert reservation.room_number is None

    def test_user_delete_removes_employee(self, db_session, sample_employee):
        with committing(db_session):
            db_session.delete(sample_employee.user)
        assert _count(db_session, Employee) == 0
        assert _count(db_session, Hotel) == 1

    def test_customer_delete_removes_links(self, db_session, sample_reservation, sample_customer):
        with committing(db_session):
            db_session.delete(sample_customer)
        assert _count(db_session, CustomerReservation) == 0
        assert _count(db_session, Reservation) == 1

    def test_reservation_delete_removes_links(self, db_session, sample_reservation):
        with committing(db_session):
            db_session.delete(sample_reservation)
        assert _count(db_session, CustomerReservation) == 0
        assert _count(db_session, Customer) == 1

    def test_task_delete_removes_room_service(self, db_session, sample_task, sample_reservation):
        _add(db_session, RoomService(task_id=sample_task.id,
                                     reservation_number=sample_reservation.number, price=30.0))
        with committing(db_session):
            db_session.delete(sample_task)
        assert _count(db_session, RoomService) == 0
        assert _count(db_session, Reservation) == 1

    def test_reservation_delete_removes_room_service(self, db_session, sample_task, sample_reservation):
        _add(db_session, RoomService(task_id=sample_task.id,
                                     reservation_number=sample_reservation.number, price=30.0))
        with committing(db_session):
            db_session.execute(delete(Reservation))
        assert _count(db_session, RoomService) == 0
        assert _count(db_session, Task) == 1


class TestSetNullDelete:

    def test_room_delete_keeps_reservations(self, db_session, sample_reservation):
        with committing(db_session):
            db_session.delete(db_session.get(Room, 101))

        reservation = db_session.query(Reservation).one()
        assert reservation.room_number is None
        assert reservation.total_price == 300.0

    def test_employee_delete_keeps_tasks(self, db_session, sample_task):
        with committing(db_session):
            db_session.execute(delete(Employee))

        task = db_session.query(Task).one()
        assert task.employee_id is None
        assert task.description == "Limpar quarto 101"

    def test_employee_delete_with_loaded_tasks(self, db_session, sample_task, sample_employee):
        """任务已加载到会话中时结果相同"""
        assert len(sample_employee.tasks) == 1
        with committing(db_session):
            db_session.delete(sample_employee)
        assert db_session.query(Task).one().employee_id is None


class TestDefaults:

    def test_user_role_defaults_to_empty_list(self, db_session):
        user = _add(db_session, User(email="x@hotel.local", password="x"))
        assert user.role == []

    def test_reservation_defaults(self, db_session):
        reservation = _add(db_session, Reservation())
        assert reservation.vehicles == []
        assert reservation.status_paid is False
        assert reservation.total_price == 0
        assert reservation.room_number is None

    def test_room_defaults(self, db_session, sample_hotel):
        room = _add(db_session, Room(number=7, hotel_id=sample_hotel.id, floor=0, beds=1, daily_rate=1.0))
        assert room.available is True
        assert room.description == ""

    def test_hotel_not_deleted_by_default(self, db_session):
        assert _add(db_session, Hotel(name="Novo")).deleted is False

    def test_server_defaults_apply_to_raw_inserts(self, db_session, sample_hotel):
        """不经过 ORM 的插入同样拿到默认值"""
        with committing(db_session):
            db_session.execute(text(
                "INSERT INTO rooms (number, hotel_id, floor, beds, daily_rate) "
                "VALUES (9, 1, 1, 1, 50.0)"
            ))
            db_session.execute(text("INSERT INTO reservations (room_number) VALUES (9)"))
        room = db_session.get(Room, 9)
        assert room.available is True
        assert room.description == ""
        reservation = db_session.query(Reservation).one()
        assert reservation.status_paid is False
        assert reservation.total_price == 0
        assert reservation.vehicles == []

    def test_raw_insert_gets_empty_role(self, db_session):
        with committing(db_session):
            db_session.execute(text("INSERT INTO users (email, password) VALUES ('a@hotel.local', 'x')"))
        user = db_session.query(User).filter(User.email == "a@hotel.local").one()
        assert user.role == []

    def test_raw_insert_all_defaults(self, db_session):
        """只靠数据库默认值即可插入预订"""
        with committing(db_session):
            db_session.execute(text("INSERT INTO reservations DEFAULT VALUES"))
        reservation = db_session.query(Reservation).one()
        assert reservation.vehicles == []
        assert reservation.room_number is None

    def test_expense_date_defaults_to_now(self, db_session, sample_hotel):
        expense = _add(db_session, Expense(hotel_id=sample_hotel.id, description="Gás", value=120.0))
        db_session.refresh(expense)
        assert expense.date is not None

    def test_array_columns_round_trip(self, db_session):
        reservation = _add(db_session, Reservation(vehicles=["ABC-1234", "XYZ-9876"]))
        db_session.expire_all()
        assert db_session.get(Reservation, reservation.number).vehicles == ["ABC-1234", "XYZ-9876"]

    def test_bare_string_rejected(self, db_session):
        """单个字符串不能当作列表写入，否则会被拆成字符"""
        db_session.add(Reservation(vehicles="ABC-1234"))
        with pytest.raises(StatementError) as exc_info:
            db_session.flush()
        assert isinstance(exc_info.value.orig, TypeError)
        db_session.rollback()
        assert _count(db_session, Reservation) == 0


class TestPostTimestamps:

    def test_created_at_set_by_database(self, db_session):
        post = _add(db_session, Post(name="hello"))
        db_session.refresh(post)
        assert post.created_at is not None
        assert post.updated_at is None

    def test_updated_at_set_on_update(self, db_session):
        post = _add(db_session, Post(name="hello"))
        with committing(db_session):
            post.name = "world"
        db_session.refresh(post)
        assert post.updated_at is not None
