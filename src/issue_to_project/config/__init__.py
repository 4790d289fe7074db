"""Configuration loading."""

from issue_to_project.config.loader import REQUIRED_INPUTS, action_input, load_config

__all__ = ["REQUIRED_INPUTS", "action_input", "load_config"]
