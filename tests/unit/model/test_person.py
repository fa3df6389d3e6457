"""
Unit tests for the Person entity

Tests:
- Construction and required fields
- Weak (is_same_person) and strong (==) identity
- Keyword search via contains()
"""
import dataclasses

import pytest

from core.exceptions import ValidationError
from model import Address, Application, Email, Job, Name, Person, Phone, Stage


class TestPersonConstruction:
    """Test Person construction and accessors"""

    def test_getters_return_inputs(self):
        name, phone = Name("Alex Yeoh"), Phone("87438807")
        email, address = Email("alexyeoh@example.com"), Address("Blk 30")
        applications = {Application(Job("SWE123"), Stage("Interview"))}

        person = Person(name, phone, email, address, applications)

        assert person.name is name
        assert person.phone is phone
        assert person.email is email
        assert person.address is address
        assert person.applications == applications

    @pytest.mark.parametrize("missing", ["name", "phone", "email", "address", "applications"])
    def test_missing_field_rejected(self, missing):
        fields = {
            "name": Name("Alex Yeoh"),
            "phone": Phone("87438807"),
            "email": Email("alexyeoh@example.com"),
            "address": Address("Blk 30"),
            "applications": [],
        }
        fields[missing] = None
        with pytest.raises(ValidationError) as exc_info:
            Person(**fields)
        assert exc_info.value.field == missing

    def test_raw_strings_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Person("Alex Yeoh", Phone("123"), Email("a@bc"), Address("Blk 30"), [])
        assert exc_info.value.field == "name"

        with pytest.raises(ValidationError) as exc_info:
            Person(Name("Alex Yeoh"), "123", Email("a@bc"), Address("Blk 30"), [])
        assert exc_info.value.field == "phone"

    def test_string_applications_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Person(Name("Alex Yeoh"), Phone("123"), Email("a@bc"), Address("Blk 30"), "SWE")
        assert exc_info.value.field == "applications"

    def test_non_application_elements_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Person(Name("Alex Yeoh"), Phone("123"), Email("a@bc"), Address("Blk 30"), ["SWE123"])
        assert exc_info.value.field == "applications"

    def test_duplicate_applications_collapse(self, make_person):
        person = make_person(applications=(("SWE123", "Interview"), ("SWE123", "interview")))
        assert len(person.applications) == 1

    def test_applications_view_is_read_only(self, alex):
        with pytest.raises(AttributeError):
            alex.applications.add(Application(Job("DS456"), Stage("Applied")))
        with pytest.raises(AttributeError):
            alex.applications.clear()

    def test_person_immutable(self, alex):
        with pytest.raises(dataclasses.FrozenInstanceError):
            alex.name = Name("Bob")

    def test_applications_copied_from_input(self):
        applications = [Application(Job("SWE123"), Stage("Applied"))]
        person = Person(
            Name("Alex Yeoh"), Phone("911"), Email("a@bc"), Address("Blk 30"), applications
        )
        applications.append(Application(Job("DS456"), Stage("Offer")))
        assert len(person.applications) == 1

    def test_with_applications(self, alex):
        edited = alex.with_applications([])
        assert edited.applications == frozenset()
        assert edited.is_same_person(alex)
        assert edited != alex

    def test_str(self, alex):
        assert str(alex) == (
            "Alex Yeoh; Phone: 87438807; Email: alexyeoh@example.com; "
            "Address: Blk 30; Applications: [SWE123: Interview]"
        )

    def test_str_without_applications(self, make_person):
        assert "Applications" not in str(make_person(applications=()))


class TestIsSamePerson:
    """Test weak identity"""

    def test_same_object(self, alex):
        assert alex.is_same_person(alex)

    def test_none(self, alex):
        assert not alex.is_same_person(None)

    def test_same_name_different_details(self, alex, make_person):
        other = make_person(
            phone="99999999",
            email="other@example.com",
            address="Elsewhere",
            applications=(("DS456", "Offer"),),
        )
        assert alex.is_same_person(other)
        assert other.is_same_person(alex)

    def test_different_name(self, alex, make_person):
        assert not alex.is_same_person(make_person(name="Alex Yeo"))

    def test_name_is_case_sensitive(self, alex, make_person):
        assert not alex.is_same_person(make_person(name="alex yeoh"))


class TestEquality:
    """Test strong identity and hashing"""

    def test_equal_persons(self, alex, make_person):
        copy = make_person()
        assert alex == copy
        assert hash(alex) == hash(copy)
        assert len({alex, copy}) == 1

    def test_other_types(self, alex):
        assert alex != "Alex Yeoh"
        assert alex != None  # noqa: E711

    @pytest.mark.parametrize(
        "changes",
        [
            {"name": "Bob Choo"},
            {"phone": "91234567"},
            {"email": "bob@example.com"},
            {"address": "Blk 31"},
            {"applications": (("SWE123", "Offer"),)},
            {"applications": ()},
        ],
    )
    def test_any_field_difference(self, alex, make_person, changes):
        assert alex != make_person(**changes)

    def test_application_order_irrelevant(self, make_person):
        first = make_person(applications=(("SWE123", "Applied"), ("DS456", "Offer")))
        second = make_person(applications=(("DS456", "Offer"), ("SWE123", "Applied")))
        assert first == second
        assert hash(first) == hash(second)


class TestContains:
    """Test keyword search"""

    def test_name_substring(self, alex):
        assert alex.contains("alex")
        assert alex.contains("yeoh")

    def test_term_is_case_insensitive(self, alex):
        assert alex.contains("ALEX")

    def test_other_fields(self, alex):
        assert alex.contains("8743")
        assert alex.contains("example.com")
        assert alex.contains("blk 30")

    def test_no_match(self, alex):
        assert not alex.contains("99999999")

    def test_job_id_exact(self, alex):
        assert alex.contains("jobid:SWE123")

    def test_job_id_unknown(self, alex):
        assert not alex.contains("jobid:xyz")

    def test_job_id_is_not_substring(self, alex):
        assert not alex.contains("jobid:SWE12")

    def test_job_id_is_case_sensitive(self, alex):
        assert not alex.contains("jobid:swe123")

    def test_progress_case_insensitive(self, alex):
        assert alex.contains("progress:interview")
        assert alex.contains("progress:INTERVIEW")

    def test_progress_exact(self, alex):
        assert not alex.contains("progress:offer")
        assert not alex.contains("progress:inter")

    def test_empty_value_after_prefix(self, alex):
        assert not alex.contains("jobid:")
        assert not alex.contains("progress:")

    def test_extra_colons_kept_in_value(self, alex):
        assert not alex.contains("jobid:SWE123:extra")

    def test_any_application_matches(self, bernice):
        assert bernice.contains("jobid:DS456")
        assert bernice.contains("progress:applied")
        assert bernice.contains("progress:offer")
