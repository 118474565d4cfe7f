"""Cargo Fleet: 차량 화물 배정 및 주행 가능성 검사."""

__version__ = '0.1.0'
