"""
Service layer abstraction.

``WordStore`` owns the SQL for the ``words`` table; ``LookupService``
wraps it with input validation, normalization and the suggest policy.
API handlers only talk to ``LookupService``.
"""
