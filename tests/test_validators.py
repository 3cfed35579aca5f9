"""Tests for shared validators."""

from datetime import date, datetime

import pytest

from dental_clinic.shared.validators import (
    only_digits,
    parse_iso_date,
    validate_br_phone,
    validate_cpf,
    validate_patient_name,
)


class TestCpf:
    @pytest.mark.parametrize("cpf", ["529.982.247-25", "52998224725", "111.444.777-35"])
    def test_valid(self, cpf):
        assert validate_cpf(cpf) == only_digits(cpf)

    def test_wrong_check_digit(self):
        with pytest.raises(ValueError, match="Invalid CPF"):
            validate_cpf("529.982.247-26")

    def test_repeated_digits(self):
        with pytest.raises(ValueError):
            validate_cpf("111.111.111-11")

    @pytest.mark.parametrize("cpf", ["", None, "123", "5299822472512"])
    def test_wrong_length(self, cpf):
        with pytest.raises(ValueError, match="11 digits"):
            validate_cpf(cpf)


class TestPhone:
    @pytest.mark.parametrize(
        "phone,expected",
        [
            ("(11) 98765-4321", "11987654321"),
            ("(21) 3456-7890", "2134567890"),
        ],
    )
    def test_valid(self, phone, expected):
        assert validate_br_phone(phone) == expected

    @pytest.mark.parametrize("phone", ["", "12345", "+55 (11) 98765-4321"])
    def test_invalid(self, phone):
        with pytest.raises(ValueError, match="10 or 11 digits"):
            validate_br_phone(phone)


class TestName:
    def test_strips_whitespace(self):
        assert validate_patient_name("  Ana  ") == "Ana"

    @pytest.mark.parametrize("name", ["", "   ", "A", None])
    def test_too_short(self, name):
        with pytest.raises(ValueError):
            validate_patient_name(name)


class TestParseIsoDate:
    def test_string(self):
        assert parse_iso_date("2024-06-14") == date(2024, 6, 14)

    def test_date_and_datetime(self):
        assert parse_iso_date(date(2024, 6, 14)) == date(2024, 6, 14)
        assert parse_iso_date(datetime(2024, 6, 14, 9, 30)) == date(2024, 6, 14)

    @pytest.mark.parametrize("value", ["14/06/2024", "2024-6-14", "", None])
    def test_bad_format(self, value):
        with pytest.raises(ValueError):
            parse_iso_date(value)

    def test_impossible_date(self):
        with pytest.raises(ValueError, match="not a valid calendar date"):
            parse_iso_date("2024-02-30")
