"""Validators do relay Slack."""

from api.validators.slack.form import read_outbound_message

__all__ = ["read_outbound_message"]
