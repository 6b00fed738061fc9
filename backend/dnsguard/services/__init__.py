# Services package

from .record_gateway import (
    PdnsTable, RecordQueryGateway, SQLAlchemyRecordGateway, TableNameService,
)

__all__ = [
    'PdnsTable',
    'RecordQueryGateway',
    'SQLAlchemyRecordGateway',
    'TableNameService',
]
