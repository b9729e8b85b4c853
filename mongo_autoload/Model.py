"""Named handle binding a pydantic schema to a MongoDB collection."""

from typing import Any

from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.database import Database


class Model:
    """Read and write documents of one schema in one collection.

    A model holds its collection name, not a collection. ``bind`` points it at
    a database; the registry rebinds every model each time a client connects.
    Documents are validated through ``schema`` before insertion and parsed back
    into ``schema`` instances on read. The ``_id`` field is not part of the
    schema and is projected out of reads.
    """

    def __init__(self, name: str, schema: type[BaseModel], collection_name: str, database: Database | None = None):
        self.name = name
        self.schema = schema
        self.collection_name = collection_name
        self.database = database

    def __repr__(self) -> str:
        return f"Model(name={self.name!r}, schema={self.schema.__name__}, collection={self.collection_name!r})"

    def bind(self, database: Database) -> None:
        self.database = database

    @property
    def collection(self) -> Collection:
        if self.database is None:
            raise RuntimeError(f"Model {self.name} is not bound to a database")
        return self.database[self.collection_name]

    def _validate(self, document: BaseModel | dict[str, Any]) -> BaseModel:
        if isinstance(document, self.schema):
            return document
        if isinstance(document, BaseModel):
            document = document.model_dump()
        return self.schema.model_validate(document)

    def insert_one(self, document: BaseModel | dict[str, Any]) -> Any:
        """Validate and insert one document.

        Returns:
            The inserted ``_id``
        """
        validated = self._validate(document)
        return self.collection.insert_one(validated.model_dump()).inserted_id

    def find_one(self, filter: dict[str, Any] | None = None) -> BaseModel | None:
        document = self.collection.find_one(filter or {}, {"_id": 0})
        if document is None:
            return None
        return self.schema.model_validate(document)

    def find(self, filter: dict[str, Any] | None = None, limit: int = 0) -> list[BaseModel]:
        cursor = self.collection.find(filter or {}, {"_id": 0})
        if limit:
            cursor = cursor.limit(limit)
        return [self.schema.model_validate(document) for document in cursor]

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self.collection.count_documents(filter or {})

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self.collection.delete_many(filter).deleted_count
