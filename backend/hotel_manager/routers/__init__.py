# API Routers
from hotel_manager.routers import (
    auth, hotels, users, rooms, employees, tasks, customers,
    reservations, room_services, expenses
)

__all__ = [
    'auth', 'hotels', 'users', 'rooms', 'employees', 'tasks', 'customers',
    'reservations', 'room_services', 'expenses'
]
