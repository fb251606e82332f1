"""Seed members and a sample Arvantis fest."""

import asyncio
import sys
import argparse
import random
from datetime import datetime, timezone
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from faker import Faker
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from syntax_club.core.database import get_db, init_db
from syntax_club.models.base import utcnow
from syntax_club.models.enums import FestItemKind
from syntax_club.repositories.arvantis import ArvantisRepository
from syntax_club.repositories.event import EventRepository
from syntax_club.repositories.member import MemberRepository
from syntax_club.schemas.arvantis import FestCreate, GuidelineCreate, PartnerCreate, PrizeCreate
from syntax_club.schemas.event import EventCreate
from syntax_club.schemas.member import MemberCreate, SocialLink
from syntax_club.services.arvantis import ArvantisService
from syntax_club.services.event import EventService
from syntax_club.services.member import MemberService

DEPARTMENTS = ["Web", "App", "Design", "AI/ML", "Competitive Programming", "Media", "Events"]
DESIGNATIONS = ["Engineer", "Designer", "Developer", "Coordinator", "Content Writer", "Volunteer"]
SKILLS = ["Python", "React", "Figma", "Go", "SQL", "Docker", "C++", "Video Editing", "Public Speaking"]


class ClubSeeder:
    """Seeding class for sample club data."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.member_service = MemberService(MemberRepository(session))
        self.arvantis_service = ArvantisService(ArvantisRepository(session), EventRepository(session))
        self.event_service = EventService(EventRepository(session), ArvantisRepository(session))
        self.fake = Faker("en_IN")

    async def create_leadership(self):
        """Create the core leadership team."""
        print("Creating leadership...")
        leaders = [
            ("President", None),
            ("Vice President", None),
            ("Treasurer", None),
            ("Technical Head", "Web"),
        ]
        for designation, department in leaders:
            member = MemberCreate(
                fullname=self.fake.name(),
                email=self.fake.email(),
                designation=[designation],
                department=[department] if department else [],
                skills=random.sample(SKILLS, 3),
                bio=self.fake.sentence(nb_words=12),
            )
            created = await self.member_service.create_member(member)
            print(f"Created leader: {created.fullname} ({designation})")

    async def create_members(self, count: int = 24):
        """Create department members."""
        print(f"Creating {count} members...")
        for _ in range(count):
            name = self.fake.name()
            member = MemberCreate(
                fullname=name,
                email=self.fake.email(),
                designation=[random.choice(DESIGNATIONS)],
                department=random.sample(DEPARTMENTS, random.choice([1, 1, 2])),
                skills=random.sample(SKILLS, random.randint(1, 4)),
                social_links=[SocialLink(platform="github", url=f"https://github.com/{self.fake.user_name()}")],
                bio=self.fake.sentence(nb_words=15),
            )
            await self.member_service.create_member(member)

    async def create_fest(self):
        """Create this year's fest with guidelines, prizes, partners and linked events."""
        year = utcnow().year
        print(f"Creating Arvantis {year}...")
        fest = await self.arvantis_service.create_fest(FestCreate(
            year=year,
            description="Annual technical fest of the Syntax club.",
            start_date=datetime(year, 3, 14, 9, 0, tzinfo=timezone.utc),
            end_date=datetime(year, 3, 16, 18, 0, tzinfo=timezone.utc),
        ))
        identifier = str(fest.year)

        for title, details in [
            ("Registration", "Teams of up to four members register before the deadline."),
            ("Conduct", "Follow the code of conduct at every venue."),
            ("Submissions", "Projects must be submitted through the portal."),
        ]:
            await self.arvantis_service.add_item(
                identifier, FestItemKind.GUIDELINES, GuidelineCreate(title=title, details=details)
            )

        for position, amount in [("1st", 30000), ("2nd", 20000), ("3rd", 10000)]:
            await self.arvantis_service.add_item(
                identifier, FestItemKind.PRIZES, PrizeCreate(title="Hackathon", position=position, amount=amount)
            )

        for name, tier in [("Acme Cloud", "sponsor"), ("Open Source Society", "collaborator")]:
            await self.arvantis_service.add_partner(identifier, PartnerCreate(name=name, tier=tier))

        for title, category, day in [("Hackathon", "competition", 14), ("Design Sprint", "workshop", 15)]:
            event = await self.event_service.create_event(EventCreate(
                title=title,
                description=self.fake.sentence(nb_words=10),
                event_date=datetime(year, 3, day, 10, 0, tzinfo=timezone.utc),
                venue="Main Auditorium",
                organizer="Syntax Club",
                category=category,
            ))
            await self.arvantis_service.link_event(identifier, event.id)

    async def run_seeding(self):
        await self.create_leadership()
        await self.create_members()
        await self.create_fest()
        print("Seeding completed successfully!")

    async def clear_all_data(self):
        """Clear all seeded data."""
        print("Clearing all data...")
        await self.session.execute(text("DELETE FROM members"))
        await self.session.execute(text("DELETE FROM arvantis_fests"))
        await self.session.execute(text("DELETE FROM events"))
        await self.session.commit()
        print("All data cleared successfully!")


async def main():
    """Main seeding function."""
    parser = argparse.ArgumentParser(description='Database seeding script')
    parser.add_argument('action', choices=['up', 'down'], help='up: create data, down: clear data')
    args = parser.parse_args()

    await init_db()
    try:
        async for session in get_db():
            seeder = ClubSeeder(session)

            if args.action == 'down':
                await seeder.clear_all_data()
            else:
                await seeder.run_seeding()
            break

    except Exception as e:
        print(f"Seeding failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
