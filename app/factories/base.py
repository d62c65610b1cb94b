"""Minimal persistent object factory.

A factory knows its model class and a set of default attributes. Callers
override any attribute by keyword; attribute values that are zero-arg
callables are resolved once per built object. Hooks registered with
``after_instantiate`` run on every new object before it is persisted.
"""

from typing import Callable, ClassVar, List, Optional

from faker import Faker
from sqlmodel import Session, SQLModel


class ModelFactory:
    model: ClassVar[type]

    def __init__(self, session: Optional[Session] = None, faker: Optional[Faker] = None):
        self.session = session
        self.faker = faker or Faker()
        self._after_instantiate: List[Callable] = []
        self.initialize()

    def defaults(self) -> dict:
        return {}

    def initialize(self) -> "ModelFactory":
        return self

    def after_instantiate(self, callback: Callable) -> "ModelFactory":
        self._after_instantiate.append(callback)
        return self

    def instantiate(self, **attributes) -> SQLModel:
        values = {**self.defaults(), **attributes}
        values = {key: value() if callable(value) else value for key, value in values.items()}

        obj = self.model(**values)

        for callback in self._after_instantiate:
            callback(obj)

        return obj

    def create(self, **attributes) -> SQLModel:
        obj = self.instantiate(**attributes)

        if self.session is not None:
            self.session.add(obj)
            self.session.commit()
            self.session.refresh(obj)

        return obj

    def create_many(self, count: int, **attributes) -> list:
        return [self.create(**attributes) for _ in range(count)]
