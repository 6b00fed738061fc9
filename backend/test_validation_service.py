"""
Tests for the record validation service
"""

import logging

import pytest
from pydantic import ValidationError

from dnsguard.core.exceptions import RecordStoreException, UnsupportedRecordType
from dnsguard.models import Domain, Record
from dnsguard.schemas.dns import RecordCandidate
from dnsguard.services.record_gateway import SQLAlchemyRecordGateway, TableNameService
from dnsguard.services.validation_service import RecordValidationService

from conftest import make_config


def test_dispatches_by_type(service):
    result = service.validate("cname", "target.example.com", "alias.example.com", zone_name="example.com")
    assert result.is_valid()
    assert result.get_data()["content"] == "target.example.com"


def test_default_ttl_comes_from_config(gateway):
    service = RecordValidationService(make_config(dns={"default_ttl": 300}), gateway)

    result = service.validate("A", "192.0.2.1", "www.example.com")
    assert result.get_data()["ttl"] == 300

    result = service.validate("A", "192.0.2.1", "www.example.com", default_ttl=60)
    assert result.get_data()["ttl"] == 60


def test_unsupported_type_raises(service):
    with pytest.raises(UnsupportedRecordType):
        service.validate("BOGUS", "anything", "www.example.com")


def test_validate_candidate(service):
    candidate = RecordCandidate(
        type="MX",
        name="example.com",
        content="mail.example.com",
        prio="20",
        ttl=3600,
        zone_name="example.com",
    )

    result = service.validate_candidate(candidate)
    assert result.get_data() == {"content": "mail.example.com", "name": "example.com", "prio": 20, "ttl": 3600}


def test_candidate_record_id_defaults_to_zero():
    candidate = RecordCandidate(type="A", name="www.example.com", content="192.0.2.1", record_id=None)
    assert candidate.record_id == 0

    with pytest.raises(ValidationError):
        RecordCandidate(type="A", name="www.example.com", content="192.0.2.1", record_id=-1)


def test_validation_is_repeatable(service, gateway):
    gateway.add("www.example.com", "A", "192.0.2.1")

    first = service.validate("CNAME", "target.example.com", "www.example.com")
    second = service.validate("CNAME", "target.example.com", "www.example.com")
    assert first == second
    assert not first.is_valid()


def test_rejections_are_logged(service, gateway, caplog):
    gateway.add("www.example.com", "A", "192.0.2.1")

    with caplog.at_level(logging.INFO, logger="dnsguard.validation"):
        service.validate("CNAME", "target.example.com", "www.example.com")

    assert "Rejected CNAME record 'www.example.com'" in caplog.text


def test_store_failures_propagate(db_session):
    config = make_config(database={"records_table": "no_such_table"})
    service = RecordValidationService(config, SQLAlchemyRecordGateway(db_session, TableNameService(config)))

    with pytest.raises(RecordStoreException):
        service.validate("CNAME", "target.example.com", "alias.example.com")


class TestCNAMEExclusivity:
    """A name holding a CNAME holds nothing else, checked against a real store"""

    @pytest.fixture
    def store(self, db_session, config, sql_gateway):
        domain = Domain(name="example.com", type="NATIVE")
        db_session.add(domain)
        db_session.flush()

        def add(name, record_type, content, record_id=None):
            record = Record(id=record_id, domain_id=domain.id, name=name, type=record_type,
                            content=content, ttl=3600)
            db_session.add(record)
            db_session.flush()
            return record

        service = RecordValidationService(config, sql_gateway)
        return service, add

    def test_cname_rejected_next_to_other_data(self, store):
        service, add = store
        add("www.example.com", "A", "192.0.2.1")

        result = service.validate("CNAME", "target.example.com", "www.example.com", zone_name="example.com")
        assert not result.is_valid()

    def test_other_data_rejected_next_to_cname(self, store):
        service, add = store
        add("alias.example.com", "CNAME", "target.example.com")

        for record_type, content in [("A", "192.0.2.1"), ("TXT", '"hello"'), ("MX", "mail.example.com")]:
            result = service.validate(record_type, content, "alias.example.com", zone_name="example.com")
            assert not result.is_valid(), record_type
            assert "CNAME" in result.get_message()

    def test_second_cname_rejected(self, store):
        service, add = store
        add("alias.example.com", "CNAME", "target.example.com")

        result = service.validate("CNAME", "other.example.com", "alias.example.com", zone_name="example.com")
        assert not result.is_valid()

    def test_updating_a_record_excludes_itself(self, store):
        service, add = store
        record = add("alias.example.com", "CNAME", "target.example.com", record_id=40)

        result = service.validate("CNAME", "elsewhere.example.net", "alias.example.com",
                                  record_id=record.id, zone_name="example.com")
        assert result.is_valid()

    def test_mx_target_cannot_become_cname(self, store):
        service, add = store
        add("example.com", "MX", "mail.example.com")

        result = service.validate("CNAME", "mailhost.example.net", "mail.example.com", zone_name="example.com")
        assert not result.is_valid()
        assert "MX or NS" in result.get_message()

    @pytest.mark.parametrize("name", ["WWW.example.com", "www.example.com."])
    def test_cname_rejected_next_to_other_data_in_another_spelling(self, store, name):
        service, add = store
        add("www.example.com", "A", "192.0.2.1")

        result = service.validate("CNAME", "target.example.net", name, zone_name="example.com")
        assert not result.is_valid()

    @pytest.mark.parametrize("name", ["Alias.Example.com", "alias.example.com."])
    def test_other_data_rejected_next_to_cname_in_another_spelling(self, store, name):
        service, add = store
        add("alias.example.com", "CNAME", "target.example.com")

        result = service.validate("A", "192.0.2.5", name, zone_name="example.com")
        assert not result.is_valid()
        assert "CNAME" in result.get_message()
