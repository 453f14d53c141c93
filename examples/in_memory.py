"""Filter in-memory records with the same filter set used for SQL.

RecordQuery implements the Queryable protocol over plain dictionaries,
which makes it handy for fixtures, caches and small datasets.
"""

from scopefilters import FilterSet, MatchKind, RecordQuery


class UserFilters(FilterSet):
    pass


UserFilters.filter_by("email", match=MatchKind.PATTERN)
UserFilters.filter_by("role")
UserFilters.filter_by("active")


class AdminFilters(UserFilters):
    pass


# Admins search by exact email instead of substring.
AdminFilters.filter_by("email")

users = RecordQuery.from_records(
    "users",
    [
        {"email": "admin@example.com", "role": "moderator", "active": True},
        {"email": "ops-admin@example.com", "role": "moderator", "active": False},
        {"email": "jane@example.com", "role": "editor", "active": True},
    ],
)

for filter_set in (
    UserFilters(email="admin", role="moderator", active=True),
    AdminFilters(email="admin@example.com"),
    UserFilters(email="", role=None),
):
    print(filter_set)
    for record in filter_set.apply(users).records():
        print(f"  {record['email']}")
