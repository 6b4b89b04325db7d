import json
import logging

from django.core.management.base import BaseCommand, CommandError

from webid.exceptions import (
    DocumentResolutionError,
    ExtractionError,
    UnparseableDocument,
)
from webid.resolvers import fetch_profile
from webid.serializers import ProfileSerializer

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Fetch WebID documents and print their profiles as JSON"

    def add_arguments(self, parser):
        parser.add_argument("uris", type=str, nargs="+", help="WebID URIs")
        parser.add_argument("--indent", type=int, default=2, help="JSON indentation")

    def handle(self, *args, **options):
        uris = options["uris"]
        failed = []

        for uri in uris:
            logger.info(f"Resolving: {uri}")
            try:
                profile = fetch_profile(uri)
            except (DocumentResolutionError, UnparseableDocument, ExtractionError) as exc:
                logger.error(f"Failed to resolve {uri}: {exc}")
                failed.append(uri)
                continue

            data = ProfileSerializer(profile).data
            self.stdout.write(json.dumps(data, indent=options["indent"]))

        if failed:
            raise CommandError(f"Could not resolve: {', '.join(failed)}")
