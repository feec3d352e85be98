from sfdc_hubspot_sync.application.services.property_mapper import map_properties
from sfdc_hubspot_sync.domain.mappings import CONTACT_MAPPINGS
from sfdc_hubspot_sync.domain.records import SalesforceRecord


def _record(**fields):
    return SalesforceRecord.from_trigger({"type": "Contact", "ID": "003XXX", **fields})


def test_copies_only_fields_present_in_record():
    record = _record(**{"First Name": "John", "Phone": "+44 1234 567890"})
    properties = map_properties(record, {}, {"First Name": "firstname", "Phone": "phone", "Fax": "fax"})

    assert properties == {"firstname": "John", "phone": "+44 1234 567890"}
    assert "fax" not in properties


def test_present_field_with_empty_value_is_copied():
    record = _record(**{"Last Name": ""})
    assert map_properties(record, {}, CONTACT_MAPPINGS) == {"lastname": ""}


def test_mutates_and_returns_the_given_bag():
    record = _record(Phone="123")
    bag = {"email": "contact@example.com"}
    result = map_properties(record, bag, CONTACT_MAPPINGS)

    assert result is bag
    assert bag == {"email": "contact@example.com", "phone": "123"}


def test_fields_outside_the_mapping_table_are_ignored():
    record = _record(Title="Chief Punctuality Officer")
    assert map_properties(record, {}, CONTACT_MAPPINGS) == {}
