"""
First-run setup: create tables, seed ranks and departments, and create the
initial super admin. Prints the one-time password once.

Usage: python bootstrap.py [EMPLOYEE_CODE] [EMAIL] [FULL_NAME]
"""

import asyncio
import logging
import sys

from sqlmodel import SQLModel

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.officials import BootstrapUseCase
from src.depends import AsyncSessionLocal, engine

logger = logging.getLogger("bootstrap")


async def main(args):
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        result = await BootstrapUseCase(SqlAlchemyUnitOfWork(session)).execute(*args)

    await engine.dispose()

    response = result.value
    logger.info(
        f"Seeded {response.ranks_seeded} ranks and {response.departments_seeded} departments"
    )
    if response.official is None:
        logger.info("Officials already exist; no super admin created")
        return

    print(f"Super admin {response.official.employee_code} created.")
    print(f"One-time password: {response.generated_secret}")
    print("It must be changed at first login and will not be shown again.")


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper())
    asyncio.run(main(sys.argv[1:4]))
