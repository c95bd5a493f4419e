"""
Checks on the row level security policies in the Supabase migrations.
"""
import re
from pathlib import Path

import pytest

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "supabase" / "migrations"

POLICY_PATTERN = re.compile(
    r'CREATE POLICY "(?P<name>[^"]+)" ON (?P<table>\w+) FOR (?P<command>\w+)(?P<body>.*?);',
    re.DOTALL,
)


def load_policies():
    sql = "\n".join(path.read_text() for path in sorted(MIGRATIONS_DIR.glob("*.sql")))
    return {match.group("name"): match.groupdict() for match in POLICY_PATTERN.finditer(sql)}


POLICIES = load_policies()


def with_check(policy):
    _, _, check = policy["body"].partition("WITH CHECK")
    return " ".join(check.split())


class TestRowLevelSecurity:

    def test_policies_found(self):
        assert "profiles_owner_update" in POLICIES

    @pytest.mark.parametrize("name", sorted(
        name for name, policy in POLICIES.items() if policy["command"] in ("INSERT", "UPDATE", "ALL")
    ))
    def test_writes_are_checked(self, name):
        assert with_check(POLICIES[name]), f"{name} has no WITH CHECK clause"

    def test_owner_cannot_grant_admin_on_insert(self):
        assert "is_admin = false" in with_check(POLICIES["profiles_owner_insert"])

    def test_owner_cannot_change_admin_flag_on_update(self):
        check = with_check(POLICIES["profiles_owner_update"])

        assert "auth.uid() = id" in check
        assert "is_admin = is_admin()" in check
