#!/usr/bin/env python3
"""
Demo script for the user service.

Runs the create and fetch use cases against a throwaway SQLite database,
without starting the HTTP server.
"""

from user_service.database import create_db_engine, init_schema
from user_service.errors import UserNotFoundError
from user_service.repositories import SqlAlchemyUserRepository
from user_service.services import CreateUserService, GetUserByIdService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def main() -> None:
    engine = create_db_engine("sqlite:///:memory:")
    init_schema(engine)
    repository = SqlAlchemyUserRepository.create(engine)

    create_user = CreateUserService.create(repository=repository)
    get_user = GetUserByIdService.create(repository=repository)

    print_section("Creating users")
    for name, phone in [("Ada", "123"), ("Grace", None), ("Linus", "555-0100")]:
        user = create_user.execute(name, phone)
        print(f"  ✓ Created #{user.id}: {user.name} (phone={user.phone})")

    print_section("Fetching users")
    for user_id in (1, 2, 3, 9999):
        try:
            user = get_user.execute(user_id)
            print(f"  ✓ #{user.id}: {user.name} (phone={user.phone})")
        except UserNotFoundError as e:
            print(f"  ✗ #{user_id}: {e}")

    engine.dispose()


if __name__ == "__main__":
    main()
