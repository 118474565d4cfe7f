"""Cargo Fleet 도메인 레이어."""
