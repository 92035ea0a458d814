from events.stores.interfaces import EventStore, ParticipationStore

__all__ = ["EventStore", "ParticipationStore"]
