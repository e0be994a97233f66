"""Credential Matching: find the member a login identifier + secret belongs to.

Invariants:
    - Identifier matches either the email field or the tax_id field
    - Secret comparison is exact: case-sensitive, no trimming, no hashing
    - First match in collection order wins
    - No match returns None (a failed login is not an error)

Design Decisions:
    - Plaintext comparison mirrors how credentials are stored today; hashing is
      out of scope for this layer
"""

from typing import Iterable

from copejem.schemas.member import Member


def identifier_matches(member: Member, identifier: str) -> bool:
    return member.email == identifier or (
        member.tax_id is not None and member.tax_id == identifier
    )


def find_member_by_credentials(
    members: Iterable[Member], identifier: str, secret: str,
) -> Member | None:
    for member in members:
        if (
            identifier_matches(member, identifier)
            and member.password is not None
            and member.password == secret
        ):
            return member
    return None
