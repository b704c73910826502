"""Allow ``python -m atman_prompts``."""

from atman_prompts.main import cli

cli()
