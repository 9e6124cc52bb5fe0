#!/usr/bin/env python3
"""
Database management script.
Creates, drops, resets and seeds the LightBnB schema, and checks connectivity.
"""

import asyncio
import sys
import argparse
import logging
from datetime import date
from sqlalchemy.engine import make_url

from lightbnb.config import get_settings
from lightbnb.database import (
    create_tables,
    drop_tables,
    verify_database_connection,
    close_db_connection,
    get_session,
)
from lightbnb.models import Reservation, PropertyReview
from lightbnb.schemas import UserCreate, PropertyCreate
from lightbnb.services import UserService, PropertyService
from lightbnb.utils.auth import hash_password
from lightbnb.utils.exceptions import LightBnBError
from lightbnb.utils.log import configure_logging

logger = logging.getLogger(__name__)


class MigrationManager:
    """Manages the database schema and sample data."""

    async def check(self) -> None:
        await verify_database_connection()

    async def create(self) -> None:
        await create_tables()

    async def drop(self) -> None:
        await drop_tables()

    async def seed_database(self) -> None:
        """Seed the database with a host, a guest and two listings."""
        logger.info("Seeding database with sample data")

        async with get_session() as session:
            users = UserService(session)
            properties = PropertyService(session)

            host = await users.add_user(UserCreate(
                name="Eva Stanley",
                email="sebastianguerra@ymail.com",
                password=hash_password("password"),
            ))
            guest = await users.add_user(UserCreate(
                name="Dominic Parks",
                email="victoriablackwell@outlook.com",
                password=hash_password("password"),
            ))

            listings = []
            for title, city, cost in [
                ("Speed lamp", "Namsub", 93061),
                ("Blank corner", "Bohbatev", 85234),
            ]:
                listings.append(await properties.add_property(PropertyCreate(
                    owner_id=host.id,
                    title=title,
                    description="description",
                    cost_per_night=cost,
                    parking_spaces=2,
                    number_of_bathrooms=2,
                    number_of_bedrooms=3,
                    country="Canada",
                    street="536 Namsub Highway",
                    city=city,
                    province="Quebec",
                    post_code="28142",
                )))

            for listing, rating in zip(listings, [5, 4]):
                reservation = Reservation(
                    start_date=date(2018, 9, 11),
                    end_date=date(2018, 9, 26),
                    property_id=listing.id,
                    guest_id=guest.id,
                )
                session.add(reservation)
                await session.flush()
                session.add(PropertyReview(
                    guest_id=guest.id,
                    property_id=listing.id,
                    reservation_id=reservation.id,
                    rating=rating,
                    message="message",
                ))
            await session.commit()

        logger.info("Database seeding completed")

    async def reset_database(self) -> None:
        """Drop and recreate all tables, then seed them."""
        await drop_tables()
        await create_tables()
        await self.seed_database()
        logger.info("Database reset completed")


async def run(command: str, manager: MigrationManager) -> None:
    try:
        if command == "check":
            await manager.check()
        elif command == "create":
            await manager.create()
        elif command == "drop":
            await manager.drop()
        elif command == "seed":
            await manager.seed_database()
        elif command == "reset":
            await manager.reset_database()
    finally:
        await close_db_connection()


def main():
    """Main CLI interface for schema management."""
    parser = argparse.ArgumentParser(description="LightBnB database management")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("check", help="Check database connectivity")
    subparsers.add_parser("create", help="Create all tables")
    subparsers.add_parser("seed", help="Seed database with sample data")

    drop_parser = subparsers.add_parser("drop", help="Drop all tables (not in production)")
    drop_parser.add_argument("--confirm", action="store_true", help="Confirm dropping tables")

    reset_parser = subparsers.add_parser("reset", help="Drop, create and seed (not in production)")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    configure_logging()
    logger.info(f"Using database {make_url(get_settings().database_url).render_as_string(hide_password=True)}")

    if args.command in ("drop", "reset") and not args.confirm:
        print(f"Database {args.command} requires --confirm flag")
        return

    try:
        asyncio.run(run(args.command, MigrationManager()))
    except (LightBnBError, RuntimeError) as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
