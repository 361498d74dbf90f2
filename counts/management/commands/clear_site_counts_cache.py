from django.core.management.base import BaseCommand

from counts.block import SHARED_CACHE_KEY, SiteCountsBlock, cache_key_for, item_cache_key


class Command(BaseCommand):
    help = "Drop cached Site Counts block markup"

    def add_arguments(self, parser):
        parser.add_argument(
            "--post",
            type=int,
            action="append",
            default=[],
            metavar="ID",
            help="Also drop the entry scoped to this post id (repeatable)",
        )
        parser.add_argument(
            "--class-name",
            action="append",
            default=[],
            metavar="CLASS",
            help="Also drop entries rendered with this CSS class (repeatable)",
        )

    def handle(self, *args, **options):
        cache = SiteCountsBlock().cache
        class_names = [""] + options["class_name"]

        keys = []
        for class_name in class_names:
            keys.append(cache_key_for(SHARED_CACHE_KEY, class_name))
            keys.extend(item_cache_key(pk, class_name) for pk in options["post"])

        removed = 0
        for key in keys:
            if cache.delete(key):
                removed += 1
                self.stdout.write(f"removed {key}")
            else:
                self.stdout.write(f"not cached {key}")

        self.stdout.write(self.style.SUCCESS(f"Cleared {removed} of {len(keys)} entries"))
