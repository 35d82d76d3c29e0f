"""Core services (pure logic, no I/O)."""
