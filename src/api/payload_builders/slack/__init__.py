"""Payload builders para a Slack Web API."""

from api.payload_builders.slack.message import build_post_message_form

__all__ = ["build_post_message_form"]
