"""MongoDB infrastructure for essential_memories."""

from essential_memories.infra.mongo.client import MongoClient
from essential_memories.infra.mongo.repositories import MongoStorageRepository

__all__ = ["MongoClient", "MongoStorageRepository"]
