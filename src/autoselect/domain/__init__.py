"""Domain layer: types, protocols, events and errors shared by every layer."""
