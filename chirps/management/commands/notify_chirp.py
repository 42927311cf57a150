"""
Management command to re-send the "new Chirp" notifications for a Chirp.
Usage: python manage.py notify_chirp <chirp_id> [--sync]
"""

from django.core.management.base import BaseCommand, CommandError

from chirps.models import Chirp
from chirps.tasks import send_chirp_created_notifications


class Command(BaseCommand):
    help = "Queue (or run with --sync) the new-Chirp notification job for an existing Chirp"

    def add_arguments(self, parser):
        parser.add_argument("chirp_id", type=int, help="Primary key of the Chirp")
        parser.add_argument(
            "--sync",
            action="store_true",
            help="Send the notifications in this process instead of queueing the job",
        )

    def handle(self, *args, **options):
        chirp_id = options["chirp_id"]

        if not Chirp.objects.filter(pk=chirp_id).exists():
            raise CommandError(f"Chirp {chirp_id} does not exist")

        if not options["sync"]:
            result = send_chirp_created_notifications.delay(chirp_id)
            self.stdout.write(
                self.style.SUCCESS(f"Queued notifications for chirp {chirp_id} (task {result.id})")
            )
            return

        summary = send_chirp_created_notifications.apply(args=[chirp_id]).get()
        self.stdout.write(f"Recipients: {summary['recipients']}")
        self.stdout.write(f"Sent: {summary['sent']}")
        self.stdout.write(f"Failed: {summary['failed']}")
        style = self.style.SUCCESS if summary["failed"] == 0 else self.style.WARNING
        self.stdout.write(style(f"Done notifying for chirp {chirp_id}"))
