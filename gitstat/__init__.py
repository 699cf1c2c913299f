"""Terminal dashboard of a GitHub user's profile and contribution calendar."""

__version__ = "0.1.0"
