"""
Tests for the SQLAlchemy record gateway against an in-memory SQLite store
"""

import pytest

from dnsguard.core.exceptions import RecordStoreException
from dnsguard.models import Domain, Record
from dnsguard.services.record_gateway import (
    PdnsTable, SQLAlchemyRecordGateway, TableNameService,
)

from conftest import make_config


@pytest.fixture
def zone(db_session):
    domain = Domain(name="example.com", type="NATIVE")
    db_session.add(domain)
    db_session.flush()

    db_session.add_all([
        Record(id=1, domain_id=domain.id, name="www.example.com", type="A", content="192.0.2.1", ttl=3600),
        Record(id=2, domain_id=domain.id, name="alias.example.com", type="CNAME",
               content="www.example.com", ttl=3600),
        Record(id=3, domain_id=domain.id, name="example.com", type="MX",
               content="mail.example.com", ttl=3600, prio=10),
    ])
    db_session.flush()
    return domain


def test_name_and_type_not(sql_gateway, zone):
    assert sql_gateway.exists_record_with_name_and_type_not("www.example.com", "CNAME")
    assert not sql_gateway.exists_record_with_name_and_type_not("www.example.com", "A")
    assert not sql_gateway.exists_record_with_name_and_type_not("missing.example.com", "CNAME")


def test_name_and_type(sql_gateway, zone):
    assert sql_gateway.exists_record_with_name_and_type("alias.example.com", "CNAME")
    assert not sql_gateway.exists_record_with_name_and_type("alias.example.com", "A")


def test_exclude_id(sql_gateway, zone):
    assert not sql_gateway.exists_record_with_name_and_type("alias.example.com", "CNAME", 2)
    assert sql_gateway.exists_record_with_name_and_type("alias.example.com", "CNAME", 99)
    assert not sql_gateway.exists_record_with_name_and_type_not("www.example.com", "CNAME", 1)


@pytest.mark.parametrize("exclude_id", [None, 0])
def test_no_exclusion(sql_gateway, zone, exclude_id):
    assert sql_gateway.exists_record_with_name_and_type("alias.example.com", "CNAME", exclude_id)


def test_content_and_type_in(sql_gateway, zone):
    assert sql_gateway.exists_record_with_content_and_type_in("mail.example.com", ["MX", "NS"])
    assert not sql_gateway.exists_record_with_content_and_type_in("mail.example.com", ["NS"])
    assert not sql_gateway.exists_record_with_content_and_type_in("www.example.com", ["MX", "NS"])
    assert not sql_gateway.exists_record_with_content_and_type_in("mail.example.com", [])


def test_queries_do_not_write(sql_gateway, zone, db_session):
    sql_gateway.exists_record_with_name_and_type("alias.example.com", "CNAME")
    assert not db_session.new
    assert not db_session.dirty
    assert db_session.query(Record).count() == 3


def test_table_names(config):
    names = TableNameService(config)
    assert names.get_table(PdnsTable.RECORDS) == "records"
    assert names.get_table("domains") == "domains"


def test_table_names_with_schema_prefix():
    names = TableNameService(make_config(database={"pdns_db_name": "pdns"}))
    assert names.split(PdnsTable.RECORDS) == ("pdns", "records")
    assert names.get_table(PdnsTable.RECORDS) == "pdns.records"


def test_gateway_reports_its_table(db_session):
    config = make_config(database={"pdns_db_name": "pdns", "records_table": "pdns_records"})
    gateway = SQLAlchemyRecordGateway.from_config(db_session, config)
    assert gateway.get_table_name_for(PdnsTable.RECORDS) == "pdns.pdns_records"
    assert gateway.get_table_name_for(PdnsTable.DOMAINS) == "pdns.domains"


def test_store_failure_is_raised(db_session):
    gateway = SQLAlchemyRecordGateway(
        db_session,
        TableNameService(make_config(database={"records_table": "no_such_table"})),
    )

    with pytest.raises(RecordStoreException) as exc_info:
        gateway.exists_record_with_name_and_type("alias.example.com", "CNAME")
    assert exc_info.value.details["table"] == "no_such_table"
