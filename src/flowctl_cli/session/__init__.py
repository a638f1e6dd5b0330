"""Session implementations for flowctl."""

from flowctl_cli.session.store import InMemorySession, PersistentSession, SessionError

__all__ = ["InMemorySession", "PersistentSession", "SessionError"]
