"""atman-prompts — scaffold bundled prompt templates into a project."""

__version__ = "0.1.0"
