# app/database.py
import logging
from datetime import datetime
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """Connection handle owned by the application lifespan."""

    def __init__(self, client: AsyncIOMotorClient, db_name: str, collection_name: str):
        self.client = client
        self.db: AsyncIOMotorDatabase = client[db_name]
        self.collection_name = collection_name

    @property
    def employees(self) -> AsyncIOMotorCollection:
        return self.db[self.collection_name]

    async def ping(self) -> None:
        await self.client.admin.command("ping")


def connect_to_mongo(settings: Settings) -> Database:
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    database = Database(client, settings.MONGODB_DB_NAME, settings.MONGODB_COLLECTION)
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)
    return database


def close_mongo_connection(database: Optional[Database]) -> None:
    if database and database.client:
        database.client.close()
        logger.info("Closed MongoDB connection")


async def init_db(database: Database) -> None:
    # Secondary lookup indexes, non-unique
    await database.employees.create_index([("organizationId", ASCENDING)])
    await database.employees.create_index([("departmentId", ASCENDING)])
    logger.info("Indexes ensured on collection %s", database.collection_name)


async def insert_sample_data(database: Database) -> bool:
    if await database.employees.count_documents({}) > 0:
        logger.info("Sample data already exists. Skipping insertion.")
        return False

    employees = [
        {"organizationId": 1, "departmentId": 1, "name": "John Doe",
         "birthdate": datetime(1985, 4, 12), "position": "Sales Manager"},
        {"organizationId": 1, "departmentId": 2, "name": "Jane Smith",
         "birthdate": datetime(1990, 9, 3), "position": "Marketing Analyst"},
        {"organizationId": 2, "departmentId": 3, "name": "Bob Johnson",
         "birthdate": datetime(1978, 1, 27), "position": "Engineer"},
    ]
    await database.employees.insert_many(employees)
    logger.info("Inserted %d sample employees", len(employees))
    return True


def get_database(request: Request) -> Database:
    return request.app.state.database
