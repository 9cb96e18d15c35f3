"""
Persistence for users, roles and cars over a SQLAlchemy Session.

Route and controller code goes through these stores instead of building
queries itself, so the controller can be exercised with mocked stores.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from carrental.models import Car, Role, User


class RoleStore:
    """Lookups on the static roles table."""

    model_name = "Role"

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, role_id: int) -> Role | None:
        return self.db.get(Role, role_id)

    def find_by_name(self, name: str) -> Role | None:
        return self.db.query(Role).filter(Role.name == name).first()


class UserStore:
    """Lookup and creation of user accounts. Emails are stored lowercased."""

    model_name = "User"

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str, with_role: bool = False) -> User | None:
        query = self.db.query(User)
        if with_role:
            query = query.options(joinedload(User.role))
        return query.filter(User.email == email).first()

    def create(self, name: str, email: str, encrypted_password: str, role_id: int) -> User:
        """
        Insert a user and commit.
        Raises sqlalchemy.exc.IntegrityError when the email is already taken.
        """
        user = User(
            name=name,
            email=email,
            encrypted_password=encrypted_password,
            role_id=role_id,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user


class CarStore:
    """Paginated listing and admin CRUD for cars."""

    model_name = "Car"

    def __init__(self, db: Session) -> None:
        self.db = db

    def count(self, size: str | None = None) -> int:
        query = self.db.query(func.count(Car.id))
        if size is not None:
            query = query.filter(Car.size == size)
        return query.scalar() or 0

    def list_page(self, page: int, page_size: int, size: str | None = None) -> list[Car]:
        """Return page (1-based) of cars ordered by id."""
        query = self.db.query(Car)
        if size is not None:
            query = query.filter(Car.size == size)
        return (
            query.order_by(Car.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )

    def find_by_id(self, car_id: int) -> Car | None:
        return self.db.get(Car, car_id)

    def create(self, name: str, price: int, size: str, image: str | None = None) -> Car:
        car = Car(name=name, price=price, size=size, image=image)
        self.db.add(car)
        self.db.commit()
        self.db.refresh(car)
        return car

    def delete(self, car: Car) -> None:
        self.db.delete(car)
        self.db.commit()
