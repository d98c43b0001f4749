"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services enforce the portfolio's business rules and call repositories for
database work. Routers own the transaction and commit after a service call.
"""
