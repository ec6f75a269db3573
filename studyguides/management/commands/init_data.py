import json
import os

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import User
from studyguides.models import Flashcard, StudyGuide


class Command(BaseCommand):
    help = "Replace users, study guides and flashcards with the contents of a JSON file"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="MOCK_DATA.json", help="JSON file name to load data from"
        )

    def handle(self, *args, **options):
        file_name = options.get("file", "MOCK_DATA.json")
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path) as json_file:
                data = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Error loading data: {e}") from e

        with transaction.atomic():
            # Review states cascade from both sides.
            StudyGuide.objects.all().delete()
            User.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("All existing data has been deleted"))

            for row in data.get("users", []):
                User.objects.create_user(
                    row["username"],
                    id=row["id"],
                    external_uid=row["external_uid"],
                    email=row.get("email", ""),
                )

            card_count = 0
            for guide_row in data.get("study_guides", []):
                guide = StudyGuide.objects.create(
                    id=guide_row["id"],
                    title=guide_row["title"],
                    description=guide_row.get("description", ""),
                )
                for card_row in guide_row.get("flashcards", []):
                    Flashcard.objects.create(study_guide=guide, **card_row)
                    card_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Loaded {len(data.get('users', []))} users and {card_count} flashcards from {file_name}"
            )
        )
