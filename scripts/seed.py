#!/usr/bin/env python3
"""Seed a development database with users, posts, comments, replies, likes and follows.

Usage:
    python scripts/seed.py [--users 10] [--posts-per-user 5]

Prints a bearer token for the first seeded user.
"""

import argparse
import asyncio
import random
import sys

import logfire

from social.config import Settings
from social.domain.service import (
    CommentService,
    FollowService,
    LikeService,
    PostService,
    ReplyService,
    UserService,
)
from social.domain.value import LikeTarget, Username
from social.persistence.database import create_engine, create_session_factory
from social.persistence.repository import (
    PostgresCommentRepository,
    PostgresFollowRepository,
    PostgresLikeRepository,
    PostgresPostRepository,
    PostgresReplyRepository,
    PostgresUserRepository,
)
from social.util.jwt import create_token
from social.util.observability import configure_logfire

FIRST_NAMES = ["Ada", "Grace", "Alan", "Edsger", "Barbara", "Donald", "Frances", "Ken"]
LAST_NAMES = ["Lovelace", "Hopper", "Turing", "Dijkstra", "Liskov", "Knuth", "Allen"]
WORDS = (
    "hello world today coffee code review deploy weekend music garden "
    "travel book movie sunrise rain idea project team launch"
).split()


def sentence(rng: random.Random, words: int = 8) -> str:
    return " ".join(rng.choice(WORDS) for _ in range(words)).capitalize() + "."


async def seed(settings: Settings, users: int, posts_per_user: int, rng: random.Random) -> str:
    engine = create_engine(settings.database)
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session:
            user_service = UserService(PostgresUserRepository(session))
            post_service = PostService(PostgresPostRepository(session))
            comment_service = CommentService(
                PostgresCommentRepository(session), post_service
            )
            reply_service = ReplyService(PostgresReplyRepository(session), comment_service)
            like_service = LikeService(
                PostgresLikeRepository(session), post_service, comment_service
            )
            follow_service = FollowService(PostgresFollowRepository(session), user_service)

            created = []
            suffix = rng.randrange(10_000)
            for i in range(users):
                name = rng.choice(FIRST_NAMES)
                last_name = rng.choice(LAST_NAMES)
                username = f"{name.lower()}{suffix}_{i}"
                created.append(
                    await user_service.create_user(
                        name=name,
                        last_name=last_name,
                        username=Username(username),
                        email=f"{username}@example.com",
                    )
                )

            for user in created:
                for other in rng.sample(created, k=min(3, len(created))):
                    if other.id != user.id:
                        await follow_service.follow(user.id, other.id)

            for user in created:
                for _ in range(posts_per_user):
                    post = await post_service.create_post(user.id, sentence(rng))
                    for commenter in rng.sample(created, k=min(2, len(created))):
                        comment = await comment_service.create_comment(
                            post.id, commenter.id, sentence(rng, 5)
                        )
                        await reply_service.create_reply(
                            comment.id, user.id, sentence(rng, 4)
                        )
                        await like_service.like(LikeTarget.COMMENT, comment.id, user.id)
                    for liker in rng.sample(created, k=min(3, len(created))):
                        await like_service.like(LikeTarget.POST, post.id, liker.id)

            await session.commit()
            logfire.info("Database seeded", users=len(created))
    finally:
        await engine.dispose()

    first = created[0]
    return create_token(str(first.id), first.username.root, settings.auth)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--users", type=int, default=10)
    parser.add_argument("--posts-per-user", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    token = asyncio.run(
        seed(settings, max(args.users, 1), args.posts_per_user, random.Random(args.seed))
    )
    print(f"Bearer token for the first user:\n{token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
