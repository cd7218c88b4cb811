"""
Django management command to test database and cache connections.
"""

import sys

from django.core.management.base import BaseCommand

from core.health import check_cache, check_database


class Command(BaseCommand):
    help = "Test database and cache connections to verify configuration"

    def handle(self, *args, **options):
        """Run health checks for the database and the cache."""
        success = True

        error = check_database()
        if error is None:
            self.stdout.write(self.style.SUCCESS("✅ Database connection: OK"))
        else:
            self.stdout.write(self.style.ERROR(f"❌ Database connection failed: {error}"))
            success = False

        error = check_cache()
        if error is None:
            self.stdout.write(self.style.SUCCESS("✅ Cache connection: OK"))
        else:
            self.stdout.write(self.style.ERROR(f"❌ Cache connection failed: {error}"))
            success = False

        if success:
            self.stdout.write(self.style.SUCCESS("\n✅ All services OK"))
        else:
            self.stdout.write(self.style.ERROR("\n❌ Health check failed"))
            sys.exit(1)
