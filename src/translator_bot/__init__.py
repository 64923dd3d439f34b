"""Telegram bot that translates text and voice messages into text and speech."""
