"""
Tests for the CNAME record validator
"""

import pytest

from dnsguard.validation.validators import CNAMERecordValidator

from conftest import make_config


@pytest.fixture
def validator(config, gateway):
    return CNAMERecordValidator(config, gateway)


def validate(validator, content="target.example.com", name="alias.example.com", prio="",
             ttl=None, default_ttl=86400, record_id=0, zone_name="example.com"):
    return validator.validate(content, name, prio, ttl, default_ttl, record_id, zone_name)


def test_valid_cname(validator):
    result = validate(validator)

    assert result.is_valid(), result
    assert result.get_data() == {
        "content": "target.example.com",
        "name": "alias.example.com",
        "prio": 0,
        "ttl": 86400,
    }


def test_normalizes_name_and_target(validator):
    result = validate(validator, content="Target.Example.COM.", name="Alias.Example.com")
    data = result.get_data()
    assert data["name"] == "alias.example.com"
    assert data["content"] == "target.example.com"


@pytest.mark.parametrize("target,valid", [
    ("www", False),
    ("www.example.com", True),
    (".", True),
    ("example.c1", False),
    ("example.c", False),
])
def test_target_fqdn_boundary(target, valid):
    assert CNAMERecordValidator.validate_target_fqdn(target).is_valid() is valid


def test_single_label_target_is_rejected(validator):
    result = validate(validator, content="www")
    assert not result.is_valid()
    assert "fully qualified" in result.get_message()


@pytest.mark.parametrize("prio", ["", None, "0", 0])
def test_priority_coerces_to_zero(validator, prio):
    result = validate(validator, prio=prio)
    assert result.is_valid()
    assert result.get_data()["prio"] == 0


def test_nonzero_priority_fails(validator):
    result = validate(validator, prio="5")
    assert not result.is_valid()
    assert "priority" in result.get_message()


def test_ttl_is_validated(validator):
    assert validate(validator, ttl="3600").get_data()["ttl"] == 3600
    assert not validate(validator, ttl="-1").is_valid()


def test_rejects_name_with_other_record_type(validator, gateway):
    gateway.add("alias.example.com", "A", "192.0.2.1")

    result = validate(validator)
    assert not result.is_valid()
    assert "already exists a record" in result.get_message()


def test_rejects_duplicate_cname(validator, gateway):
    gateway.add("alias.example.com", "CNAME", "other.example.com")

    result = validate(validator)
    assert not result.is_valid()
    assert "already exists a CNAME" in result.get_message()


def test_update_excludes_the_record_itself(validator, gateway):
    gateway.add("alias.example.com", "CNAME", "old.example.com", id=5)

    assert validate(validator, record_id=5).is_valid()
    assert not validate(validator, record_id=0).is_valid()


def test_update_exclusion_applies_to_type_change(validator, gateway):
    gateway.add("alias.example.com", "A", "192.0.2.1", id=5)

    assert validate(validator, record_id=5).is_valid()
    assert not validate(validator, record_id=0).is_valid()


@pytest.mark.parametrize("record_type", ["MX", "NS"])
def test_rejects_name_targeted_by_mx_or_ns(validator, gateway, record_type):
    gateway.add("example.com", record_type, "alias.example.com")

    result = validate(validator)
    assert not result.is_valid()
    assert "MX or NS" in result.get_message()


def test_other_records_pointing_at_name_are_fine(validator, gateway):
    gateway.add("www.example.com", "CNAME", "alias.example.com")

    assert validate(validator).is_valid()


def test_rejects_cname_at_zone_apex(validator):
    result = validate(validator, name="example.com", zone_name="example.com")
    assert not result.is_valid()
    assert result.get_message() == "Empty CNAME records are not allowed."


def test_apex_check_skipped_without_zone(validator):
    assert validate(validator, name="example.com", zone_name=None).is_valid()
    assert validate(validator, name="example.com", zone_name="").is_valid()


def test_apex_check_ignores_case_and_trailing_dot(validator):
    assert not validate(validator, name="Example.com.", zone_name="example.com").is_valid()


def test_store_checks_run_before_syntax_checks(validator, gateway):
    gateway.add("bad name", "A", "192.0.2.1")

    result = validate(validator, name="bad name")
    assert "already exists a record" in result.get_message()


def test_fail_fast_stops_querying(validator, gateway):
    gateway.add("alias.example.com", "TXT", '"hello"')

    validate(validator)
    assert [query[0] for query in gateway.queries] == ["name_type_not"]


def test_queries_in_documented_order(validator, gateway):
    validate(validator, record_id=7)

    assert gateway.queries == [
        ("name_type_not", "alias.example.com", "CNAME", 7),
        ("name_type", "alias.example.com", "CNAME", 7),
        ("content_type_in", "alias.example.com", ("MX", "NS")),
    ]


def test_invalid_owner_name(validator):
    assert not validate(validator, name="-alias.example.com").is_valid()


def test_wildcard_owner_is_allowed_but_not_as_target(validator):
    assert validate(validator, name="*.example.com").is_valid()
    assert not validate(validator, content="*.example.net").is_valid()


@pytest.mark.parametrize("name", ["WWW.example.com", "www.example.com.", " Www.Example.COM. "])
def test_collision_ignores_case_and_trailing_dot(validator, gateway, name):
    gateway.add("www.example.com", "A", "192.0.2.1")

    result = validate(validator, name=name)
    assert not result.is_valid()
    assert "already exists a record" in result.get_message()


def test_duplicate_cname_ignores_case(validator, gateway):
    gateway.add("alias.example.com", "CNAME", "other.example.com")

    assert not validate(validator, name="ALIAS.example.com.").is_valid()


def test_mx_target_guard_ignores_case(validator, gateway):
    gateway.add("example.com", "MX", "alias.example.com")

    result = validate(validator, name="Alias.Example.com")
    assert not result.is_valid()
    assert "MX or NS" in result.get_message()


def test_queries_use_canonical_name(validator, gateway):
    validate(validator, name="Alias.Example.COM.")

    assert [query[1] for query in gateway.queries] == ["alias.example.com"] * 3


def test_canonical_name_keeps_case_when_lowercasing_disabled(gateway):
    validator = CNAMERecordValidator(make_config(dns={"lowercase_hostnames": False}), gateway)
    assert validator.lookup_name(" Alias.Example.com. ") == "Alias.Example.com"
    assert validator.lookup_name(".") == "."
