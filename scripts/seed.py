"""Database seeder for local runs of the board API."""
import asyncio
import argparse
import time

from board.database import engine, async_session, Base, transaction
from board.models import Post


async def seed(count: int = 50):
    print(f"Seeding: {count} posts")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        async with transaction(session):
            for i in range(count):
                session.add(Post.create(
                    title=f"Post {i}",
                    content=f"This is the body of sample post {i}. " * 5,
                ))

    await engine.dispose()
    elapsed = time.perf_counter() - start
    print(f"Seeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the board database")
    parser.add_argument("--count", type=int, default=50, help="Number of posts to create")
    args = parser.parse_args()
    asyncio.run(seed(count=args.count))


if __name__ == "__main__":
    main()
