"""NeuroLearn dashboard: REST API over the learning session."""
