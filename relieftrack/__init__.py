"""ReliefTrack: relief-supply tracking service."""
