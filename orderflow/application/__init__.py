"""Application layer - coordinators that sequence domain collaborators."""
