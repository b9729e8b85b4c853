"""Model registry.

Callers register models by name and look them up later. A name is registered
at most once; later attempts are no-ops.
"""

from collections.abc import Iterator

from pymongo.database import Database

from .Model import Model


class ModelRegistry:
    def __init__(self) -> None:
        self._models: dict[str, Model] = {}

    def insert_if_absent(self, model: Model) -> bool:
        """Register ``model`` unless its name is taken.

        Returns:
            True if the model was inserted, False if the name already existed
        """
        if model.name in self._models:
            return False
        self._models[model.name] = model
        return True

    def bind(self, database: Database) -> None:
        """Point every registered model at ``database``."""
        for model in self._models.values():
            model.bind(database)

    def get(self, name: str) -> Model | None:
        return self._models.get(name)

    def names(self) -> list[str]:
        return sorted(self._models)

    def __getitem__(self, name: str) -> Model:
        return self._models[name]

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)


default_registry = ModelRegistry()
