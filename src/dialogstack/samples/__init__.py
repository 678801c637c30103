"""Sample bots."""

from dialogstack.samples.profile import SAMPLE_BOTS, ProfileDialog, build_age_bot, build_profile_bot

__all__ = ["SAMPLE_BOTS", "ProfileDialog", "build_age_bot", "build_profile_bot"]
