"""
Unit tests for applicant value objects

Tests:
- Name, Phone, Email, Address validation
- Job and Stage validation
- Application equality
"""
import pytest

from core.exceptions import ValidationError
from model import Address, Application, Email, Job, Name, Phone, PipelineStage, Stage


class TestName:
    """Test Name value object"""

    @pytest.mark.parametrize("value", ["Alex Yeoh", "peter the 2nd", "12345", "Capital Tan"])
    def test_valid_names(self, value):
        assert str(Name(value)) == value

    @pytest.mark.parametrize("value", ["", " ", " Alex", "peter*", "^"])
    def test_invalid_names(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Name(value)
        assert exc_info.value.field == "name"

    def test_name_equality_by_value(self):
        assert Name("Alex Yeoh") == Name("Alex Yeoh")
        assert Name("Alex Yeoh") != Name("alex yeoh")
        assert hash(Name("Alex Yeoh")) == hash(Name("Alex Yeoh"))

    def test_name_immutable(self):
        name = Name("Alex Yeoh")
        with pytest.raises(Exception):  # FrozenInstanceError
            name.value = "Bob"


class TestPhone:
    """Test Phone value object"""

    @pytest.mark.parametrize("value", ["911", "93121534", "124293842033123"])
    def test_valid_phones(self, value):
        assert str(Phone(value)) == value

    @pytest.mark.parametrize("value", ["", "91", "phone", "9011p041", "9312 1534"])
    def test_invalid_phones(self, value):
        with pytest.raises(ValidationError, match="at least 3 digits"):
            Phone(value)


class TestEmail:
    """Test Email value object"""

    @pytest.mark.parametrize(
        "value",
        [
            "alexyeoh@example.com",
            "a@bc",
            "PeterJack_1190@example.com",
            "a1+be.d@example1.com",
            "peter_jack@very-very-very-long-example.com",
            "if.you.dream.it_you.can.do.it@example.com",
        ],
    )
    def test_valid_emails(self, value):
        assert str(Email(value)) == value

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "@example.com",
            "peterjackexample.com",
            "peterjack@",
            "peterjack@example.c",
            "-peterjack@example.com",
            "peterjack-@example.com",
            "peterjack@-example.com",
            "peter jack@example.com",
        ],
    )
    def test_invalid_emails(self, value):
        with pytest.raises(ValidationError):
            Email(value)


class TestAddress:
    """Test Address value object"""

    def test_valid_address(self):
        assert str(Address("Blk 30")) == "Blk 30"
        assert str(Address("-")) == "-"

    @pytest.mark.parametrize("value", ["", " ", " Blk 30"])
    def test_invalid_address(self, value):
        with pytest.raises(ValidationError, match="should not be blank"):
            Address(value)


class TestJobAndStage:
    """Test Job and Stage value objects"""

    def test_valid_job(self):
        assert str(Job("SWE123")) == "SWE123"
        assert Job.is_valid("data-eng_2")

    @pytest.mark.parametrize("value", ["", " SWE", "SWE 123", "SWE:1"])
    def test_invalid_job(self, value):
        with pytest.raises(ValidationError):
            Job(value)

    def test_stage_is_canonicalised(self):
        assert str(Stage("interview")) == "Interview"
        assert Stage("OFFER") == Stage("Offer")
        assert Stage("Applied").pipeline_stage is PipelineStage.APPLIED

    def test_invalid_stage(self):
        with pytest.raises(ValidationError, match="Stage should be one of"):
            Stage("ghosted")

    def test_application_equality(self):
        first = Application(Job("SWE123"), Stage("Interview"))
        second = Application(Job("SWE123"), Stage("interview"))
        assert first == second
        assert len({first, second}) == 1
        assert str(first) == "[SWE123: Interview]"

    def test_application_requires_fields(self):
        with pytest.raises(ValidationError):
            Application(None, Stage("Applied"))
