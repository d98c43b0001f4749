"""이벤트 패키지 — 프로세스 내 프로필 이벤트 디스패처.

Event package — In-process profile event dispatcher.
"""
