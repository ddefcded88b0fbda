"""Dialogflow / Actions on Google fulfillment webhook."""

FULFILLMENT_VERSION = "1.0.0"

__all__ = ["FULFILLMENT_VERSION"]
