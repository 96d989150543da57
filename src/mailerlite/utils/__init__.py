"""Utility helpers for the MailerLite client."""
