"""Cargo Fleet 프레젠테이션 레이어 (CLI, 이벤트 출력)."""
