import json

from django.core.management.base import BaseCommand

from apps.api.v1.serializers import ProductSerializer
from apps.catalog.pricelist import (
    build_catalog,
    collections_from_products,
    detect_format,
    resolve_pricelist_rows,
)


class Command(BaseCommand):
    help = "Load the pricelist spreadsheet and report what the catalog will contain"

    def add_arguments(self, parser):
        parser.add_argument("--path", help="Pricelist file (default: configured source)")
        parser.add_argument("--json", action="store_true", help="Print the whole catalog as JSON")

    def handle(self, *args, **options):
        rows = resolve_pricelist_rows(options.get("path"))
        products = build_catalog(rows)

        if options["json"]:
            self.stdout.write(json.dumps(ProductSerializer(products, many=True).data, indent=2))
            return

        if not rows:
            self.stdout.write(self.style.WARNING("No rows: pricelist missing, unreadable or empty."))
            return

        collections = collections_from_products(products)
        without_images = [p.slug for p in products if not p.images]

        self.stdout.write(f"Format: {detect_format(rows)}")
        self.stdout.write(f"Rows: {len(rows)}")
        self.stdout.write(f"Collections: {len(collections)}")
        if without_images:
            self.stdout.write(f"Products without images: {len(without_images)}")
        self.stdout.write(self.style.SUCCESS(f"Products: {len(products)}"))
