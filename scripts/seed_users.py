"""Insert users into the Users table (development seeding).

Usage:
    python -m scripts.seed_users "Ann Lee" "Bo Kim" ...
Each argument is "<first name> <last name...>". All inserts run in one
transaction against ConnectionStrings:DefaultConnection.
"""

import asyncio
import sys

from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import UserRepository


def parse_full_name(value: str) -> tuple[str, str]:
    """Split "Ann Lee" into ("Ann", "Lee"); everything after the first word is the last name."""
    first, _, last = value.strip().partition(" ")
    if not first or not last.strip():
        raise ValueError(f"Expected '<first name> <last name>', got: {value!r}")
    return first, last.strip()


async def main(argv: list[str]) -> int:
    """Seed users given as full names; return process exit code."""
    if not argv:
        print('Usage: python -m scripts.seed_users "<first> <last>" ...', file=sys.stderr)
        return 1
    try:
        names = [parse_full_name(arg) for arg in argv]
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print(
            "Database not configured: set ConnectionStrings:DefaultConnection",
            file=sys.stderr,
        )
        return 1

    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                user_repo = UserRepository(session)
                created = [
                    await user_repo.create_user(first_name, last_name)
                    for first_name, last_name in names
                ]
        # Printed after commit.
        for user in created:
            print(f"Created user: {user.id} ({user.first_name} {user.last_name})")
    finally:
        await database.dispose_engine()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
