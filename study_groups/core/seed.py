"""
Demo data seeding for the in-memory group store.

Populates a fresh store with realistic study groups, members and
discussion messages using Faker. Enabled at startup through the
`seed_demo_data` setting.
"""

import logging
import random
from typing import List

from faker import Faker

from study_groups.models.groups import GroupId, Principal
from study_groups.services.domain.group_store import GroupStore

logger = logging.getLogger(__name__)

SUBJECTS = [
    "Linear Algebra", "Organic Chemistry", "Operating Systems", "Macroeconomics",
    "Data Structures", "Modern European History", "Statistics 101", "Compilers",
    "Cell Biology", "Spanish Conversation", "Discrete Mathematics", "Thermodynamics"
]


class DataSeeder:
    """Class to handle store seeding operations."""

    def __init__(self, group_store: GroupStore, seed: int = 42):
        self.store = group_store
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self.random = random.Random(seed)
        self.group_ids: List[GroupId] = []

    def create_groups(self, count: int = 5) -> None:
        """
        Create groups, each with a few members besides its creator.

        At most one group is created per entry in SUBJECTS, and joins stop
        short of the store's member limit.
        """
        if count > len(SUBJECTS):
            logger.warning(f"Requested {count} demo groups, only {len(SUBJECTS)} subjects available")
            count = len(SUBJECTS)

        for subject in self.random.sample(SUBJECTS, max(count, 0)):
            creator = self._principal()
            group_id = self.store.create_group(
                subject,
                self.fake.sentence(nb_words=8),
                creator
            ).unwrap()
            self.group_ids.append(group_id)

            joins = min(self.random.randint(2, 6), self.store.max_members - 1)
            for _ in range(joins):
                self.store.join_group(group_id, self._principal()).unwrap()

    def create_messages(self, per_group: int = 10) -> None:
        """Post messages from random members of every seeded group."""
        for group_id in self.group_ids:
            members = self.store.get_group(group_id).unwrap().members
            for _ in range(per_group):
                self.store.post_message(
                    group_id,
                    self.fake.paragraph(nb_sentences=2),
                    self.random.choice(members)
                ).unwrap()

    def run_full_seed(self, groups_count: int = 5, messages_per_group: int = 10) -> None:
        """Run the complete seeding process."""
        self.create_groups(groups_count)
        self.create_messages(messages_per_group)
        logger.info(
            f"Seeded {len(self.group_ids)} groups with {messages_per_group} messages each"
        )

    def _principal(self) -> Principal:
        return self.fake.user_name()
