"""Task calendar: month view over per-day task lists backed by a REST store."""
