"""Database seeder: recreates the schema and fills it with posts and comments."""
import asyncio
import argparse
import random
import time

from blog.database import engine, async_session, Base
from blog.domain import Post
from blog.models import Comment, Post as PostRecord

AUTHORS = ["ada", "grace", "linus", "guido", "barbara", "ken", "margaret", "dennis"]
TOPICS = ["query objects", "presenters", "active record", "stable JSON", "thin models"]


async def seed(num_posts: int, max_comments: int) -> None:
    print(f"Seeding: {num_posts} posts, up to {max_comments} comments each")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        records = []
        for i in range(num_posts):
            topic = random.choice(TOPICS)
            record = PostRecord(
                title=f"Post {i}: notes on {topic}",
                content=f"Some thoughts about {topic}. " * 10,
            )
            session.add(record)
            records.append(record)
        await session.flush()
        print(f"  Created {len(records)} posts")

        for record in records:
            for _ in range(random.randint(0, max_comments)):
                session.add(Comment(
                    content=f"Re: {record.title}",
                    author_name=random.choice(AUTHORS),
                    post_id=record.id,
                ))
        await session.flush()

        # Count through the query object so the seeded data is read back
        # the same way the API reads it.
        total_comments = 0
        for record in records:
            total_comments += await Post(id=record.id, db=session).comments.count()

        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Posts: {num_posts}")
    print(f"  Comments: {total_comments}")


def main():
    parser = argparse.ArgumentParser(description="Seed the blog database")
    parser.add_argument("--posts", type=int, default=100, help="Number of posts to create")
    parser.add_argument("--max-comments", type=int, default=5, help="Upper bound of comments per post")
    args = parser.parse_args()
    asyncio.run(seed(args.posts, args.max_comments))


if __name__ == "__main__":
    main()
