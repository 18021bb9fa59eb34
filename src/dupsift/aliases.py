from dupsift.core.models import Algorithm

ALGORITHM_ALIASES = {algorithm.value: algorithm for algorithm in Algorithm}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Duplicate detection algorithm (stages applied in order):\n"
    + "".join(
        f"  {algorithm.value:<14}: {algorithm.display_name} ({algorithm.description})\n"
        for algorithm in Algorithm
    )
    + f"Default: {Algorithm.NAME.value}\n"
)

EPILOG_TEXT = """
Examples:
  Find files sharing a name in Downloads (files above 1MB)
  %(prog)s ~/Downloads

  Include every non-empty file and compare full content
  %(prog)s ~/Downloads -m 0 --algorithm full-content

  Cheap content check for large media files
  %(prog)s ~/Videos -m 100 --algorithm fuzzy-content
"""
