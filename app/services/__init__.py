"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Contains the payment, account and bank services and the request
validation rules. Services call repositories for DB operations and only
flush; the API layer commits.
"""
