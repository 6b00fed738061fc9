"""
Shared fixtures for the validation engine tests
"""

from typing import Iterable, List, Optional

import pytest

from dnsguard.core.config import ConfigurationManager, DatabaseSettings, Settings
from dnsguard.core.database import Database
from dnsguard.services.record_gateway import SQLAlchemyRecordGateway, TableNameService
from dnsguard.services.validation_service import RecordValidationService
from dnsguard.validation.registry import ValidatorRegistry

import dnsguard.models  # noqa: F401  registers the tables on the metadata


class FakeRecordGateway:
    """In-memory record store answering the gateway queries"""

    def __init__(self, records: Optional[List[dict]] = None):
        self.records = []
        self.queries = []
        for record in records or []:
            self.add(**record)

    def add(self, name: str, type: str, content: str = "", id: Optional[int] = None) -> dict:
        record = {
            "id": id if id is not None else len(self.records) + 1,
            "name": name,
            "type": type,
            "content": content,
        }
        self.records.append(record)
        return record

    def exists_record_with_name_and_type_not(self, name, excluded_type, exclude_id=None) -> bool:
        self.queries.append(("name_type_not", name, excluded_type, exclude_id))
        return any(
            r["name"] == name and r["type"] != excluded_type and not (exclude_id and r["id"] == exclude_id)
            for r in self.records
        )

    def exists_record_with_name_and_type(self, name, record_type, exclude_id=None) -> bool:
        self.queries.append(("name_type", name, record_type, exclude_id))
        return any(
            r["name"] == name and r["type"] == record_type and not (exclude_id and r["id"] == exclude_id)
            for r in self.records
        )

    def exists_record_with_content_and_type_in(self, content, types: Iterable[str]) -> bool:
        types = set(types)
        self.queries.append(("content_type_in", content, tuple(sorted(types))))
        return any(r["content"] == content and r["type"] in types for r in self.records)

    def get_table_name_for(self, logical_table) -> str:
        return getattr(logical_table, "value", logical_table)


def make_config(**sections) -> ConfigurationManager:
    """ConfigurationManager from defaults plus per-section overrides"""
    settings = Settings(_env_file=None)
    updates = {}
    for section, values in sections.items():
        updates[section] = getattr(settings, section).model_copy(update=values)
    return ConfigurationManager(settings.model_copy(update=updates))


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def gateway():
    return FakeRecordGateway()


@pytest.fixture
def registry(config, gateway):
    return ValidatorRegistry(config, gateway)


@pytest.fixture
def service(config, gateway):
    return RecordValidationService(config, gateway)


@pytest.fixture
def database():
    db = Database(DatabaseSettings(url="sqlite://"))
    db.create_all()
    yield db
    db.close()


@pytest.fixture
def db_session(database):
    with database.get_session() as session:
        yield session


@pytest.fixture
def sql_gateway(db_session, config):
    return SQLAlchemyRecordGateway(db_session, TableNameService(config))
