"""Services Layer — admission handlers that persist what the core admits.

Invariants:
    - Every create_* runs the matching core admission before touching the session
    - Rejections raise EntityValidationError; nothing is added to the session
"""
