"""
Data access layer.

Design rules:
- Views call ONLY functions in data.service.
- Every query runs inside data.connection.database_session, so the
  in-memory handle is closed on every exit path.
- Failures come back as DataResult.error, never as exceptions.
- No env var reads here (config-only).
"""
