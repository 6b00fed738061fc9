"""
Record Query Gateway: the narrow read interface the validators use to ask
about existing records in the record store
"""

from enum import Enum
from typing import Iterable, Optional, Protocol, Tuple, Union

from sqlalchemy import column, select, table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.config import ConfigurationManager
from ..core.exceptions import RecordStoreException
from ..core.logging_config import get_record_store_logger

logger = get_record_store_logger()


class PdnsTable(str, Enum):
    """Logical PowerDNS tables"""
    DOMAINS = "domains"
    RECORDS = "records"


class TableNameService:
    """Resolves logical tables to the configured (optionally schema-qualified) names"""

    def __init__(self, config: ConfigurationManager):
        self.config = config

    def split(self, logical_table: Union[PdnsTable, str]) -> Tuple[Optional[str], str]:
        """(schema, table) for a logical table"""
        logical_table = PdnsTable(logical_table)
        name = self.config.get('database', f'{logical_table.value}_table', logical_table.value)
        schema = self.config.get('database', 'pdns_db_name', None) or None
        return schema, name

    def get_table(self, logical_table: Union[PdnsTable, str]) -> str:
        schema, name = self.split(logical_table)
        return f"{schema}.{name}" if schema else name


class RecordQueryGateway(Protocol):
    """Existence queries over the zone's current records

    ``exclude_id`` of None or 0 means no record is excluded.
    """

    def exists_record_with_name_and_type_not(self, name: str, excluded_type: str,
                                             exclude_id: Optional[int] = None) -> bool:
        ...

    def exists_record_with_name_and_type(self, name: str, record_type: str,
                                         exclude_id: Optional[int] = None) -> bool:
        ...

    def exists_record_with_content_and_type_in(self, content: str, types: Iterable[str]) -> bool:
        ...

    def get_table_name_for(self, logical_table: Union[PdnsTable, str]) -> str:
        ...


class SQLAlchemyRecordGateway:
    """RecordQueryGateway backed by a SQLAlchemy session"""

    def __init__(self, session: Session, table_names: TableNameService):
        self.session = session
        self.table_names = table_names
        schema, name = table_names.split(PdnsTable.RECORDS)
        self.records = table(
            name,
            column('id'),
            column('name'),
            column('type'),
            column('content'),
            schema=schema,
        )

    @classmethod
    def from_config(cls, session: Session, config: ConfigurationManager) -> "SQLAlchemyRecordGateway":
        return cls(session, TableNameService(config))

    def exists_record_with_name_and_type_not(self, name: str, excluded_type: str,
                                             exclude_id: Optional[int] = None) -> bool:
        query = select(self.records.c.id).where(
            self.records.c.name == name,
            self.records.c.type != excluded_type,
        )
        return self._exists(query, exclude_id)

    def exists_record_with_name_and_type(self, name: str, record_type: str,
                                         exclude_id: Optional[int] = None) -> bool:
        query = select(self.records.c.id).where(
            self.records.c.name == name,
            self.records.c.type == record_type,
        )
        return self._exists(query, exclude_id)

    def exists_record_with_content_and_type_in(self, content: str, types: Iterable[str]) -> bool:
        types = sorted(set(types))
        if not types:
            return False
        query = select(self.records.c.id).where(
            self.records.c.content == content,
            self.records.c.type.in_(types),
        )
        return self._exists(query, None)

    def get_table_name_for(self, logical_table: Union[PdnsTable, str]) -> str:
        return self.table_names.get_table(logical_table)

    def _exists(self, query, exclude_id: Optional[int]) -> bool:
        if exclude_id:
            query = query.where(self.records.c.id != exclude_id)

        try:
            return self.session.execute(query.limit(1)).first() is not None
        except SQLAlchemyError as e:
            table_name = self.get_table_name_for(PdnsTable.RECORDS)
            logger.error(f"Record store query against {table_name} failed: {e}")
            raise RecordStoreException(
                "Unable to query the record store",
                details={"table": table_name, "error": str(e)},
            ) from e
