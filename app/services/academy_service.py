"""Academy service."""

from pymongo.database import Database

from app.core.errors import ConflictError, NotFoundError
from app.db.repositories.academy import AcademyRepository
from app.schemas.academy import AcademyCreate


class AcademyService:
    def __init__(self, db: Database):
        self.repository = AcademyRepository(db)

    def list_academies(self) -> list[dict]:
        return self.repository.get_all()

    def create(self, data: AcademyCreate) -> dict:
        if self.repository.get_by_name(data.name):
            raise ConflictError("Academy already exists")
        return self.repository.insert(data.to_document())

    def get(self, academy_id: str) -> dict:
        academy = self.repository.find_by_id(academy_id)
        if not academy or academy.get("isDeleted"):
            raise NotFoundError("Academy not found")
        return academy
