"""Matchday - match lifecycle tracking with live status updates."""
