#!/usr/bin/env python3
"""Seed the database with demo users and a sample thread.

Existing users and comments are removed first. A login token is printed
for every demo user; send it as the auth_token cookie.
"""

import asyncio
import sys
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy import delete

from board.config import Settings
from board.domain.model import Comment, User
from board.domain.value import CommentId, Content, UserId
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresCommentRepository,
    PostgresUserRepository,
)
from board.persistence.tables import comments_table, users_table
from board.util.jwt import create_token
from board.util.observability import configure_logfire

DEMO_USERS = [
    ("Alex", "alex@example.com", "https://i.pravatar.cc/60?img=1"),
    ("George", "george@example.com", "https://i.pravatar.cc/60?img=2"),
    ("Masha", "masha@example.com", "https://i.pravatar.cc/60?img=5"),
    ("Syed", "syed@example.com", "https://i.pravatar.cc/60?img=3"),
    ("Julia", "julia@example.com", "https://i.pravatar.cc/60?img=4"),
]

# (author, parent index or None, content, created_at)
DEMO_THREAD = [
    (
        "Alex",
        None,
        "Fusce nec accumsan eros. Aenean ac orci a magna vestibulum posuere "
        "quis nec nisi. Maecenas rutrum vehicula condimentum. Donec volutpat "
        "nisi ac mauris consectetur gravida.",
        datetime(2017, 7, 10, 9, 0),
    ),
    ("George", 0, "Text2", datetime(2017, 7, 10, 11, 6)),
    ("Masha", 1, "Text3", datetime(2017, 7, 11, 5, 20)),
    ("Syed", 2, "Text5", datetime(2017, 7, 12, 6, 15)),
    ("Julia", None, "Text4", datetime(2017, 7, 11, 16, 28)),
]


async def seed(settings: Settings) -> dict[str, str]:
    """Replace board content with the demo data.

    Returns:
        Mapping of user email to login token
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session:
            await session.execute(delete(comments_table))
            await session.execute(delete(users_table))

            user_repository = PostgresUserRepository(session)
            comment_repository = PostgresCommentRepository(session)

            users: dict[str, User] = {}
            for name, email, avatar_url in DEMO_USERS:
                now = datetime.now()
                users[name] = await user_repository.save(
                    User(
                        id=UserId(uuid4()),
                        name=name,
                        email=email,
                        avatar_url=avatar_url,
                        created_at=now,
                        updated_at=now,
                    )
                )

            created: list[Comment] = []
            for author, parent_index, content, created_at in DEMO_THREAD:
                parent_id = created[parent_index].id if parent_index is not None else None
                created.append(
                    await comment_repository.save(
                        Comment(
                            id=CommentId(uuid4()),
                            author_id=users[author].id,
                            content=Content(content),
                            parent_id=parent_id,
                            created_at=created_at,
                            updated_at=created_at,
                        )
                    )
                )

            await session.commit()
            logfire.info(
                "Seed data inserted", users=len(users), comments=len(created)
            )
    finally:
        await engine.dispose()

    return {
        user.email: create_token(str(user.id), user.name, settings.auth)
        for user in users.values()
        if user.email
    }


def main() -> int:
    settings = Settings()
    configure_logfire(settings, service_name="board-seed")

    try:
        tokens = asyncio.run(seed(settings))
    except Exception as e:
        logfire.error(
            "Seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    print("Demo login tokens (auth_token cookie):")
    for email, token in tokens.items():
        print(f"  {email}: {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
