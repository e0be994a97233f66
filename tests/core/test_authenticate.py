"""Credential Matching: tests for find_member_by_credentials.

Tests cover:
    - Identifier matches email or tax_id
    - Password comparison is exact (case, whitespace)
    - Members without a stored password never match
    - First match in collection order wins
"""

from copejem.core.authenticate import find_member_by_credentials, identifier_matches
from copejem.schemas.member import Member


def _member(member_id, email, password, tax_id=None) -> Member:
    return Member(
        id=member_id, name=member_id, email=email, password=password,
        tax_id=tax_id, admission_year=2024,
    )


MEMBERS = [
    _member("1", "ana@copejem.org", "Teste@123", tax_id="111.111.111-11"),
    _member("2", "bia@copejem.org", "Outra@456"),
    _member("3", "ana@copejem.org", "Teste@123"),
]


def test_match_by_email():
    assert find_member_by_credentials(MEMBERS, "bia@copejem.org", "Outra@456").id == "2"


def test_match_by_tax_id():
    found = find_member_by_credentials(MEMBERS, "111.111.111-11", "Teste@123")
    assert found.id == "1"


def test_first_match_wins():
    assert find_member_by_credentials(MEMBERS, "ana@copejem.org", "Teste@123").id == "1"


def test_wrong_case_password_fails():
    assert find_member_by_credentials(MEMBERS, "ana@copejem.org", "teste@123") is None


def test_password_is_not_trimmed():
    assert find_member_by_credentials(MEMBERS, "ana@copejem.org", " Teste@123") is None


def test_identifier_is_not_normalized():
    assert find_member_by_credentials(MEMBERS, "ANA@copejem.org", "Teste@123") is None


def test_member_without_password_never_matches():
    members = [_member("9", "x@copejem.org", None)]
    assert find_member_by_credentials(members, "x@copejem.org", "") is None


def test_identifier_does_not_match_missing_tax_id():
    assert identifier_matches(MEMBERS[1], "") is False
