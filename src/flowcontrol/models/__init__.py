"""Data models for flowcontrol: states, retry configuration, snapshots."""
