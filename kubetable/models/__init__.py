"""Data models for the kubetable engine."""
